"""Customer Domain Entity

Customer directory entries, auto-filled from document customer snapshots.
Documents copy customer data instead of referencing these rows.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Index
from src.domain.base import BaseModel, generate_uuid, Timestamp, utc_now


class CustomerType(str, Enum):
    COMPANY = "company"
    INDIVIDUAL = "individual"


class Customer(BaseModel, table=True):
    """
    Customer - Directory entry of a company's customer

    Domain Rules:
    - Same tax id with a different branch code is a different customer
    - Soft-deleted rows (is_active=False) are ignored by lookups
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_company_tax_branch', 'company_id', 'tax_id', 'branch_code'),
        Index('ix_customers_company_name_branch', 'company_id', 'name', 'branch_code'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Customer identifier"
    )

    company_id: str = Field(description="Owning company")
    customer_type: CustomerType = Field(default=CustomerType.COMPANY)
    name: str = Field(description="Customer name")
    tax_id: Optional[str] = Field(default=None)
    branch_code: str = Field(default="00000")
    address: Optional[str] = Field(default=None)
    contact_name: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=Timestamp)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=Timestamp)
