"""SQLAlchemy Document Item Repository Implementation"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.document_item_repository import DocumentItemRepository
from src.domain.document import DocumentKind
from src.domain.invoice import InvoiceItem
from src.domain.quotation import QuotationItem


class SqlAlchemyDocumentItemRepository(DocumentItemRepository):
    """
    SQLAlchemy implementation of DocumentItemRepository

    replace_all deletes and inserts inside the caller's transaction; nothing
    is committed here.
    """

    kind: DocumentKind
    model = None

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_document_id(self, document_id: str) -> List:
        statement = (
            select(self.model)
            .where(self.model.document_id == document_id)
            .order_by(self.model.item_order)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def replace_all(self, document_id: str, items: List) -> List:
        await self.delete_by_document_id(document_id)
        if not items:
            return []
        self.session.add_all(items)
        await self.session.flush()
        return list(items)

    async def delete_by_document_id(self, document_id: str) -> None:
        statement = delete(self.model).where(self.model.document_id == document_id)
        await self.session.execute(statement)
        await self.session.flush()


class SqlAlchemyInvoiceItemRepository(SqlAlchemyDocumentItemRepository):
    kind = DocumentKind.INVOICE
    model = InvoiceItem


class SqlAlchemyQuotationItemRepository(SqlAlchemyDocumentItemRepository):
    kind = DocumentKind.QUOTATION
    model = QuotationItem
