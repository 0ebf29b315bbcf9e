"""Usage Meter

Gates documents leaving draft on the company's subscription and monthly
plan quota, and counts them once they have been committed.
"""

import logging
import math
from datetime import datetime, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo
from config import ApplicationConfig
from libs.result import Error
from src.app.services.usage_service import UsageService, UsageSnapshot, SubscriptionSnapshot
from src.domain.base import as_utc, utc_now
from src.domain.document import DocumentKind
from src.domain.errors import ErrorCode
from src.domain.subscription import SubscriptionStatus

logger = logging.getLogger(__name__)


def month_year_of(moment: datetime) -> str:
    """Billing period key of a timestamp (YYYY-MM)"""
    return moment.strftime("%Y-%m")


class UsageMeter:
    """
    Combined subscription and quota check for new non-draft documents

    Business Rules:
    1. Subscription must be active, or trial and not past trial_ends_at
    2. Kind counter for the current month must be below a non-null limit;
       the month is read in the billing timezone (Asia/Bangkok by default)
    3. Increments are best-effort: failures are logged, never raised
    4. Counters never go down
    """

    def __init__(
        self,
        usage_service: UsageService,
        clock: Callable[[], datetime] = utc_now,
        period_timezone: Optional[tzinfo] = None,
    ):
        self.usage_service = usage_service
        self.clock = clock
        self.period_timezone = period_timezone or ZoneInfo(ApplicationConfig.BILLING_TIMEZONE)

    def now(self) -> datetime:
        return as_utc(self.clock())

    def current_period(self) -> str:
        return month_year_of(self.now().astimezone(self.period_timezone))

    def trial_days_remaining(self, subscription: Optional[SubscriptionSnapshot]) -> int:
        if subscription is None or subscription.trial_ends_at is None:
            return 0
        seconds = (as_utc(subscription.trial_ends_at) - self.now()).total_seconds()
        return max(0, math.ceil(seconds / 86400))

    def is_subscription_usable(self, subscription: Optional[SubscriptionSnapshot]) -> bool:
        if subscription is None:
            return False
        if subscription.status == SubscriptionStatus.ACTIVE:
            return True
        if subscription.status == SubscriptionStatus.TRIAL:
            if subscription.trial_ends_at is None:
                return True
            return self.now() <= as_utc(subscription.trial_ends_at)
        return False

    async def current_usage(self, company_id: str) -> UsageSnapshot:
        return await self.usage_service.get_current_usage(company_id, self.current_period())

    async def check(self, company_id: str, kind: DocumentKind) -> Optional[Error]:
        """
        Explain why a company may not issue another document of a kind

        Args:
            company_id: Company identifier
            kind: Document kind about to leave draft

        Returns:
            SUBSCRIPTION_INACTIVE or LIMIT_EXCEEDED error, or None when allowed
        """
        subscription = await self.usage_service.get_subscription_status(company_id)
        if not self.is_subscription_usable(subscription):
            status = subscription.status.value if subscription else "none"
            return Error(
                code=ErrorCode.SUBSCRIPTION_INACTIVE.value,
                message="Subscription is not active, renew the plan to issue documents",
                reason=f"subscription_status={status}",
            )

        usage = await self.current_usage(company_id)
        limit = usage.limit_for(kind)
        count = usage.count_for(kind)
        if limit is not None and count >= limit:
            return Error(
                code=ErrorCode.LIMIT_EXCEEDED.value,
                message=f"Monthly {kind.value} limit reached ({count}/{limit})",
                reason=f"month_year={usage.month_year}, count={count}, limit={limit}",
            )
        return None

    async def can_create(self, company_id: str, kind: DocumentKind) -> bool:
        return await self.check(company_id, kind) is None

    async def increment(self, company_id: str, kind: DocumentKind) -> bool:
        """
        Count one issued document in the current period

        Returns:
            True if the counter was bumped, False if the collaborator failed
        """
        month_year = self.current_period()
        try:
            await self.usage_service.increment_usage(company_id, month_year, kind)
            return True
        except Exception as e:
            logger.error(
                f"Failed to increment {kind.value} usage for company {company_id} "
                f"in {month_year}: {e}"
            )
            return False
