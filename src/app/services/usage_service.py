"""Usage Service Interface

Read shapes and the atomic increment the usage meter consumes. Backed by
the subscription and usage counter tables in production.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.document import DocumentKind
from src.domain.subscription import SubscriptionStatus


class UsageSnapshot(BaseModel):
    """Current-period usage with the plan limits (None = unlimited)"""

    month_year: str = Field(..., description="Billing period (YYYY-MM)")
    invoice_count: int = Field(default=0)
    quotation_count: int = Field(default=0)
    invoice_limit: Optional[int] = Field(default=None)
    quotation_limit: Optional[int] = Field(default=None)

    def count_for(self, kind: DocumentKind) -> int:
        if kind == DocumentKind.INVOICE:
            return self.invoice_count
        return self.quotation_count

    def limit_for(self, kind: DocumentKind) -> Optional[int]:
        if kind == DocumentKind.INVOICE:
            return self.invoice_limit
        return self.quotation_limit


class SubscriptionSnapshot(BaseModel):
    """Subscription status and plan of a company"""

    status: SubscriptionStatus
    plan_name: str
    trial_ends_at: Optional[datetime] = None


class UsageService(ABC):
    """
    Usage/subscription collaborator

    Implementations must make increment_usage atomic at the counter row.
    """

    @abstractmethod
    async def get_current_usage(self, company_id: str, month_year: str) -> UsageSnapshot:
        """
        Read the period's counters and the plan limits

        Args:
            company_id: Company identifier
            month_year: Billing period (YYYY-MM)

        Returns:
            UsageSnapshot (zero counts when the period has no row yet)
        """
        pass

    @abstractmethod
    async def get_subscription_status(self, company_id: str) -> Optional[SubscriptionSnapshot]:
        """
        Read the company's subscription

        Args:
            company_id: Company identifier

        Returns:
            SubscriptionSnapshot, or None when the company has no subscription
        """
        pass

    @abstractmethod
    async def increment_usage(self, company_id: str, month_year: str, kind: DocumentKind) -> None:
        """
        Atomically count one more document of a kind in the period

        Args:
            company_id: Company identifier
            month_year: Billing period (YYYY-MM)
            kind: Document kind
        """
        pass
