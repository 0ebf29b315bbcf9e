"""SQLAlchemy Customer Repository Implementation"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository

    Lookups return the oldest active match when duplicates exist.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_tax_id(
        self, company_id: str, tax_id: str, branch_code: str
    ) -> Optional[Customer]:
        statement = (
            select(Customer)
            .where(Customer.company_id == company_id)
            .where(Customer.tax_id == tax_id)
            .where(Customer.branch_code == branch_code)
            .where(Customer.is_active)
            .order_by(Customer.created_at)
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def find_by_name(
        self, company_id: str, name: str, branch_code: str
    ) -> Optional[Customer]:
        statement = (
            select(Customer)
            .where(Customer.company_id == company_id)
            .where(Customer.name == name)
            .where(Customer.branch_code == branch_code)
            .where(Customer.is_active)
            .order_by(Customer.created_at)
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def update(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer
