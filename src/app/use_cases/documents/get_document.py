"""GetDocument Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.document_repository import DocumentRepository
from src.app.repositories.document_item_repository import DocumentItemRepository
from src.domain.errors import ErrorCode
from src.domain.lifecycle import KIND_RULES
from .assembly import to_response
from .dtos import DocumentResponseDTO

logger = logging.getLogger(__name__)


class GetDocument:
    """
    Use Case: Load a document with its items ordered by item_order
    """

    def __init__(self, document_repo: DocumentRepository, item_repo: DocumentItemRepository):
        self.document_repo = document_repo
        self.item_repo = item_repo
        self.kind = document_repo.kind

    async def execute(self, company_id: str, document_id: str) -> Result[DocumentResponseDTO]:
        try:
            document = await self.document_repo.get_by_id(document_id, company_id)
            if not document:
                return Return.err(
                    Error(
                        code=ErrorCode.DOCUMENT_NOT_FOUND.value,
                        message=f"{KIND_RULES[self.kind].label} {document_id} not found",
                    )
                )

            items = await self.item_repo.get_by_document_id(document.id)
            return Return.ok(to_response(self.kind, document, items))

        except Exception as e:
            logger.error(f"Failed to load {self.kind.value} {document_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.GET_DOCUMENT_FAILED.value,
                    message=f"Failed to load {self.kind.value}",
                    reason=str(e),
                )
            )
