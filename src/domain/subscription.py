"""Subscription Domain Entities

Plans define monthly document quotas; each company holds one subscription.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, String
from src.domain.base import BaseModel, generate_uuid, Timestamp, utc_now


class SubscriptionStatus(str, Enum):
    """Subscription status types"""
    TRIAL = "trial"
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    PAST_DUE = "past_due"


class Plan(BaseModel, table=True):
    """
    Plan - Subscription plan with monthly quotas

    Domain Rules:
    - invoice_limit / quotation_limit are per calendar month
    - None limit = unlimited
    """

    __tablename__ = "plans"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Plan identifier"
    )

    name: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Plan code (e.g., free, starter, pro)"
    )

    display_name: str = Field(
        default="",
        description="Name shown to users"
    )

    price_monthly: float = Field(
        default=0.0,
        description="Monthly price in THB"
    )

    invoice_limit: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
        description="Invoices per month (None = unlimited)"
    )

    quotation_limit: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, nullable=True),
        description="Quotations per month (None = unlimited)"
    )

    is_active: bool = Field(default=True, description="Whether the plan can be chosen")


class Subscription(BaseModel, table=True):
    """
    Subscription - Company subscription to a plan

    Domain Rules:
    - One subscription per company
    - Documents may leave draft only while status is active, or trial
      with trial_ends_at in the future
    """

    __tablename__ = "subscriptions"
    __table_args__ = (
        Index('ix_subscriptions_company_id', 'company_id', unique=True),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Subscription identifier"
    )

    company_id: str = Field(description="Company identifier")

    plan_id: str = Field(
        foreign_key="plans.id",
        description="Foreign key to Plan"
    )

    status: SubscriptionStatus = Field(
        description="Subscription status (trial, active, cancelled, expired, past_due)"
    )

    trial_ends_at: Optional[datetime] = Field(
        default=None,
        sa_type=Timestamp,
        description="End of the trial period"
    )

    current_period_start: Optional[datetime] = Field(default=None, sa_type=Timestamp)
    current_period_end: Optional[datetime] = Field(default=None, sa_type=Timestamp)
    cancelled_at: Optional[datetime] = Field(default=None, sa_type=Timestamp)

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=Timestamp,
        description="Subscription creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=Timestamp,
        description="Last update timestamp"
    )
