"""ListDocuments Use Case"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.document_repository import DocumentRepository
from src.domain.document import DocumentStatus
from src.domain.errors import ErrorCode
from .assembly import to_response
from .dtos import ListDocumentsResponseDTO

logger = logging.getLogger(__name__)


class ListDocuments:
    """
    Use Case: List a company's documents of one kind, newest first

    Items are not loaded; each entry carries an empty item list.
    """

    def __init__(self, document_repo: DocumentRepository):
        self.document_repo = document_repo
        self.kind = document_repo.kind

    async def execute(
        self,
        company_id: str,
        status: Optional[DocumentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Result[ListDocumentsResponseDTO]:
        try:
            documents = await self.document_repo.list_by_company(
                company_id, status=status, limit=limit, offset=offset
            )
        except Exception as e:
            logger.error(f"Failed to list {self.kind.value}s for company {company_id}: {e}")
            return Return.err(
                Error(
                    code=ErrorCode.LIST_DOCUMENTS_FAILED.value,
                    message=f"Failed to list {self.kind.value}s",
                    reason=str(e),
                )
            )

        return Return.ok(
            ListDocumentsResponseDTO(
                documents=[to_response(self.kind, document) for document in documents],
                limit=limit,
                offset=offset,
            )
        )
