"""Document Repository Interface

Defines the contract for document header persistence. One implementation
exists per document kind; both expose the same operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.document import DocumentKind, DocumentStatus


class DocumentRepository(ABC):
    """
    Repository interface for document headers (Invoice, Quotation)

    Attributes:
        kind: Document kind handled by the implementation
    """

    kind: DocumentKind

    @abstractmethod
    async def create(self, document):
        """
        Create a new document header

        Args:
            document: Invoice or Quotation entity to persist

        Returns:
            Created document
        """
        pass

    @abstractmethod
    async def get_by_id(self, document_id: str, company_id: Optional[str] = None):
        """
        Retrieve document by ID

        Args:
            document_id: Document ID
            company_id: If given, only a document owned by this company matches

        Returns:
            Document if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_company(
        self,
        company_id: str,
        status: Optional[DocumentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List:
        """
        Retrieve a company's documents, newest first

        Args:
            company_id: Company identifier
            status: Optional filter by status
            limit: Maximum number of documents to return
            offset: Offset for pagination

        Returns:
            List of documents
        """
        pass

    @abstractmethod
    async def update(self, document):
        """
        Persist changes to an existing document header

        Args:
            document: Document entity with updated values

        Returns:
            Updated document
        """
        pass

    @abstractmethod
    async def delete(self, document) -> None:
        """
        Delete a document header

        Args:
            document: Document entity to remove
        """
        pass

    @abstractmethod
    async def count_by_number_segment(
        self, company_id: str, segment: str, exclude_id: Optional[str] = None
    ) -> int:
        """
        Count documents whose number starts with a prefix-and-date segment

        Feeds the number allocator. Not isolated from concurrent inserts.

        Args:
            company_id: Company identifier
            segment: Number segment such as IV-20260205
            exclude_id: Document to leave out (the one being saved)

        Returns:
            Number of matching documents
        """
        pass
