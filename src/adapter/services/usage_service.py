"""SQLAlchemy Usage Service Implementation

Reads subscription, plan and counter rows and bumps the counters.
"""

import logging
from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.repositories.subscription_repository import SqlAlchemySubscriptionRepository
from src.adapter.repositories.usage_counter_repository import SqlAlchemyUsageCounterRepository
from src.app.services.usage_service import UsageService, UsageSnapshot, SubscriptionSnapshot
from src.domain.document import DocumentKind

logger = logging.getLogger(__name__)


class SqlAlchemyUsageService(UsageService):
    """
    Usage collaborator backed by the subscriptions, plans and usage_counters tables

    increment_usage commits on its own: it runs after the document commit
    and must not be rolled back together with anything else.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.subscription_repo = SqlAlchemySubscriptionRepository(session)
        self.counter_repo = SqlAlchemyUsageCounterRepository(session)

    async def get_current_usage(self, company_id: str, month_year: str) -> UsageSnapshot:
        counter = await self.counter_repo.get(company_id, month_year)
        snapshot = UsageSnapshot(month_year=month_year)
        if counter:
            snapshot.invoice_count = counter.invoice_count
            snapshot.quotation_count = counter.quotation_count

        subscription = await self.subscription_repo.get_by_company_id(company_id)
        if subscription:
            plan = await self.subscription_repo.get_plan(subscription.plan_id)
            if plan:
                snapshot.invoice_limit = plan.invoice_limit
                snapshot.quotation_limit = plan.quotation_limit
        return snapshot

    async def get_subscription_status(self, company_id: str) -> Optional[SubscriptionSnapshot]:
        subscription = await self.subscription_repo.get_by_company_id(company_id)
        if not subscription:
            return None
        plan = await self.subscription_repo.get_plan(subscription.plan_id)
        return SubscriptionSnapshot(
            status=subscription.status,
            plan_name=plan.name if plan else "",
            trial_ends_at=subscription.trial_ends_at,
        )

    async def increment_usage(self, company_id: str, month_year: str, kind: DocumentKind) -> None:
        try:
            await self.counter_repo.increment(company_id, month_year, kind)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.debug(f"Counted one {kind.value} for company {company_id} in {month_year}")
