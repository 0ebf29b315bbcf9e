"""SQLAlchemy Usage Counter Repository Implementation

Counters are bumped with an insert-if-missing followed by a relative
UPDATE, so concurrent increments never lose updates.
"""

from typing import Optional
from sqlalchemy import update
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.usage_counter_repository import UsageCounterRepository
from src.domain.base import generate_uuid, utc_now
from src.domain.document import DocumentKind
from src.domain.usage_counter import UsageCounter

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAlchemyUsageCounterRepository(UsageCounterRepository):
    """
    SQLAlchemy implementation of UsageCounterRepository

    Supports PostgreSQL and SQLite (ON CONFLICT DO NOTHING on both).
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, company_id: str, month_year: str) -> Optional[UsageCounter]:
        statement = (
            select(UsageCounter)
            .where(UsageCounter.company_id == company_id)
            .where(UsageCounter.month_year == month_year)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def increment(self, company_id: str, month_year: str, kind: DocumentKind) -> None:
        """
        Add one to the kind's counter of a period

        Args:
            company_id: Company identifier
            month_year: Billing period (YYYY-MM)
            kind: Which counter to bump
        """
        now = utc_now()
        dialect = self.session.bind.dialect.name
        insert = _DIALECT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Usage counters are not supported on {dialect}")

        await self.session.execute(
            insert(UsageCounter)
            .values(
                id=generate_uuid(),
                company_id=company_id,
                month_year=month_year,
                invoice_count=0,
                quotation_count=0,
                updated_at=now,
            )
            .on_conflict_do_nothing(index_elements=["company_id", "month_year"])
        )

        column = (
            UsageCounter.invoice_count
            if kind == DocumentKind.INVOICE
            else UsageCounter.quotation_count
        )
        await self.session.execute(
            update(UsageCounter)
            .where(UsageCounter.company_id == company_id)
            .where(UsageCounter.month_year == month_year)
            .values({column: column + 1, UsageCounter.updated_at: now})
            .execution_options(synchronize_session=False)
        )
