"""SQLAlchemy Document Repository Implementation

Implements document header persistence for invoices and quotations using
SQLAlchemy async session. Both kinds share one implementation and differ
only by table model.
"""

from typing import Optional, List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.document_repository import DocumentRepository
from src.domain.document import DocumentKind, DocumentStatus
from src.domain.invoice import Invoice
from src.domain.quotation import Quotation


class SqlAlchemyDocumentRepository(DocumentRepository):
    """
    SQLAlchemy implementation of DocumentRepository

    Subclasses set kind and model.
    """

    kind: DocumentKind
    model = None

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document):
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    async def get_by_id(self, document_id: str, company_id: Optional[str] = None):
        statement = select(self.model).where(self.model.id == document_id)
        if company_id is not None:
            statement = statement.where(self.model.company_id == company_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_company(
        self,
        company_id: str,
        status: Optional[DocumentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List:
        statement = select(self.model).where(self.model.company_id == company_id)

        if status:
            statement = statement.where(self.model.status == status)

        statement = statement.order_by(self.model.created_at.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, document):
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    async def delete(self, document) -> None:
        await self.session.delete(document)
        await self.session.flush()

    async def count_by_number_segment(
        self, company_id: str, segment: str, exclude_id: Optional[str] = None
    ) -> int:
        """
        Count documents numbered within a prefix-and-date segment

        Args:
            company_id: Company identifier
            segment: Number segment such as IV-20260205
            exclude_id: Document to leave out of the count

        Returns:
            Number of matching documents
        """
        statement = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.company_id == company_id)
            .where(self.model.document_number.startswith(f"{segment}-", autoescape=True))
        )
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)

        result = await self.session.execute(statement)
        return result.scalar_one()


class SqlAlchemyInvoiceRepository(SqlAlchemyDocumentRepository):
    kind = DocumentKind.INVOICE
    model = Invoice


class SqlAlchemyQuotationRepository(SqlAlchemyDocumentRepository):
    kind = DocumentKind.QUOTATION
    model = Quotation
