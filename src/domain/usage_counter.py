"""Usage Counter Domain Entity

Per-company, per-month count of documents that left draft.
"""

from datetime import datetime
from sqlmodel import Field, Column, Index
from sqlalchemy import Integer, String
from src.domain.base import BaseModel, generate_uuid, Timestamp, utc_now


class UsageCounter(BaseModel, table=True):
    """
    Usage Counter - Documents issued in one billing period

    Domain Rules:
    - One row per (company_id, month_year), month_year formatted YYYY-MM
    - Counters only grow; cancelling a document does not free quota
    - Increments are atomic SQL updates, never read-modify-write
    """

    __tablename__ = "usage_counters"
    __table_args__ = (
        Index('ix_usage_counters_company_period', 'company_id', 'month_year', unique=True),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Counter identifier"
    )

    company_id: str = Field(description="Company identifier")

    month_year: str = Field(
        sa_column=Column(String(7), nullable=False),
        description="Billing period (YYYY-MM)"
    )

    invoice_count: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Invoices issued in the period"
    )

    quotation_count: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Quotations sent in the period"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=Timestamp,
        description="Last increment timestamp"
    )
