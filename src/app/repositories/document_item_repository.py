"""Document Item Repository Interface

Defines the contract for line item persistence. Items are never edited
one by one: every save replaces the whole set.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.document import DocumentKind


class DocumentItemRepository(ABC):
    """
    Repository interface for document line items (InvoiceItem, QuotationItem)
    """

    kind: DocumentKind

    @abstractmethod
    async def get_by_document_id(self, document_id: str) -> List:
        """
        Retrieve all line items of a document ordered by item_order

        Args:
            document_id: Document ID

        Returns:
            List of items
        """
        pass

    @abstractmethod
    async def replace_all(self, document_id: str, items: List) -> List:
        """
        Delete every existing item of a document and insert the given set

        Args:
            document_id: Document ID
            items: New item entities, already numbered by item_order

        Returns:
            Inserted items
        """
        pass

    @abstractmethod
    async def delete_by_document_id(self, document_id: str) -> None:
        """
        Delete all items of a document

        Args:
            document_id: Document ID
        """
        pass
