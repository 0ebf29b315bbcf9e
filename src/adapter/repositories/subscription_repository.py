"""SQLAlchemy Subscription Repository Implementation

Implements subscription and plan persistence using SQLAlchemy async session.
"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.subscription import Plan, Subscription


class SqlAlchemySubscriptionRepository(SubscriptionRepository):
    """
    SQLAlchemy implementation of SubscriptionRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_company_id(self, company_id: str) -> Optional[Subscription]:
        """
        Retrieve subscription by company ID

        Args:
            company_id: Company identifier

        Returns:
            Subscription if found, None otherwise
        """
        statement = select(Subscription).where(Subscription.company_id == company_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_plan(self, plan_id: str) -> Optional[Plan]:
        statement = select(Plan).where(Plan.id == plan_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create(self, subscription: Subscription) -> Subscription:
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def create_plan(self, plan: Plan) -> Plan:
        self.session.add(plan)
        await self.session.flush()
        await self.session.refresh(plan)
        return plan
