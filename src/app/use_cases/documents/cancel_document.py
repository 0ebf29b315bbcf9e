"""CancelDocument Use Case

Moves an issued document to cancelled.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.document_repository import DocumentRepository
from src.domain.base import utc_now
from src.domain.document import DocumentStatus
from src.domain.errors import ErrorCode
from src.domain.lifecycle import KIND_RULES, guard_cancel
from .assembly import to_status_response
from .dtos import DocumentStatusResponseDTO

logger = logging.getLogger(__name__)


class CancelDocument:
    """
    Use Case: Cancel a non-draft document

    Business Rules:
    1. Drafts cannot be cancelled (CANNOT_CANCEL_DRAFT), they are deleted instead
    2. Cancelling twice fails with ALREADY_CANCELLED
    3. Totals, items and number stay as they are
    4. Usage counters are not given back
    """

    def __init__(self, uow: UnitOfWork, document_repo: DocumentRepository):
        self.uow = uow
        self.document_repo = document_repo
        self.kind = document_repo.kind

    async def execute(self, company_id: str, document_id: str) -> Result[DocumentStatusResponseDTO]:
        try:
            document = await self.document_repo.get_by_id(document_id, company_id)
            if not document:
                return Return.err(
                    Error(
                        code=ErrorCode.DOCUMENT_NOT_FOUND.value,
                        message=f"{KIND_RULES[self.kind].label} {document_id} not found",
                    )
                )

            cancel_error = guard_cancel(document.status)
            if cancel_error:
                return Return.err(cancel_error)

            now = utc_now()
            document.status = DocumentStatus.CANCELLED
            document.cancelled_at = now
            document.updated_at = now

            updated = await self.document_repo.update(document)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to cancel {self.kind.value} {document_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.CANCEL_DOCUMENT_FAILED.value,
                    message=f"Failed to cancel {self.kind.value}",
                    reason=str(e),
                )
            )

        logger.info(f"Cancelled {self.kind.value} {updated.document_number}")
        return Return.ok(to_status_response(self.kind, updated))
