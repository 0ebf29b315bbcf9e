"""Data Transfer Objects for Usage Use Cases"""

from typing import Optional
from pydantic import BaseModel, Field
from src.domain.subscription import SubscriptionStatus


class UsageResponseDTO(BaseModel):
    """
    Current-period usage of a company

    Limits of None mean unlimited.
    """

    company_id: str
    month_year: str = Field(..., description="Billing period (YYYY-MM)")
    invoice_count: int
    quotation_count: int
    invoice_limit: Optional[int] = None
    quotation_limit: Optional[int] = None
    subscription_status: Optional[SubscriptionStatus] = None
    plan_name: Optional[str] = None
    trial_days_remaining: int = 0
    can_create_invoice: bool
    can_create_quotation: bool
