"""DeleteDocument Use Case

Removes a draft together with its line items.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.document_repository import DocumentRepository
from src.app.repositories.document_item_repository import DocumentItemRepository
from src.domain.errors import ErrorCode
from src.domain.lifecycle import KIND_RULES, guard_delete

logger = logging.getLogger(__name__)


class DeleteDocument:
    """
    Use Case: Delete a draft document

    Business Rules:
    1. Only drafts can be deleted; issued history is cancelled instead
    2. Items go first, then the header, in one transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: DocumentRepository,
        item_repo: DocumentItemRepository,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.item_repo = item_repo
        self.kind = document_repo.kind

    async def execute(self, company_id: str, document_id: str) -> Result[bool]:
        try:
            document = await self.document_repo.get_by_id(document_id, company_id)
            if not document:
                return Return.err(
                    Error(
                        code=ErrorCode.DOCUMENT_NOT_FOUND.value,
                        message=f"{KIND_RULES[self.kind].label} {document_id} not found",
                    )
                )

            delete_error = guard_delete(document.status)
            if delete_error:
                return Return.err(delete_error)

            await self.item_repo.delete_by_document_id(document.id)
            await self.document_repo.delete(document)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete {self.kind.value} {document_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.DELETE_DOCUMENT_FAILED.value,
                    message=f"Failed to delete {self.kind.value}",
                    reason=str(e),
                )
            )

        logger.info(f"Deleted draft {self.kind.value} {document_id}")
        return Return.ok(True)
