"""Document Domain Fields

Shared shape of the two billing document kinds (quotation and invoice).
Each kind persists a header table and an items table built from these
non-table bases, so both kinds stay structurally identical.
"""

from datetime import datetime, date
from enum import Enum
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel, Timestamp, utc_now


class DocumentKind(str, Enum):
    """Billing document kinds"""
    INVOICE = "invoice"
    QUOTATION = "quotation"


class DocumentStatus(str, Enum):
    """Document status vocabulary shared by both kinds

    Which values a kind may use is decided in src.domain.lifecycle.
    """
    DRAFT = "draft"
    PENDING = "pending"      # Quotation sent for approval
    SENT = "sent"            # Quotation delivered to customer
    ISSUED = "issued"        # Tax invoice issued
    CONVERTED = "converted"  # Quotation turned into an invoice (observed only)
    CANCELLED = "cancelled"


class DiscountType(str, Enum):
    """Document-level discount types"""
    FIXED = "fixed"
    PERCENT = "percent"


class DocumentHeader(BaseModel):
    """
    Document header fields shared by quotations and invoices

    Domain Rules:
    - document_number format: {PREFIX}-{YYYYMMDD}-{NNNN}, issue date based
    - document_number may change only while the document is a draft
    - Customer fields are a snapshot, not a reference to the customer directory
    - Totals are persisted as computed at the last save, never recomputed on read
    - Once non-draft, only the cancel transition may touch the record
    """

    company_id: str = Field(
        index=True,
        description="Owning company"
    )

    document_number: str = Field(
        index=True,
        max_length=50,
        description="Human-readable number (e.g., IV-20260205-0001)"
    )

    # Customer snapshot (Revenue Code section 86/4 mandatory fields first)
    customer_name: str = Field(default="-", description="Customer name")
    customer_address: str = Field(default="", description="Customer address")
    customer_tax_id: str = Field(default="", description="Customer tax identification number")
    customer_branch_code: str = Field(
        default="00000",
        description="Customer branch code (00000 = head office)"
    )
    customer_contact: str = Field(default="", description="Contact person")
    customer_phone: str = Field(default="", description="Contact phone")
    customer_email: str = Field(default="", description="Contact email")

    issue_date: date = Field(description="Issue date, encoded in document_number")

    vat_rate: float = Field(default=7.0, description="VAT rate in percent")

    discount_type: DiscountType = Field(
        default=DiscountType.FIXED,
        description="Document-level discount type (fixed, percent)"
    )
    discount_value: float = Field(default=0.0, description="Discount amount or percent")

    # Computed totals
    subtotal: float = Field(default=0.0, description="Sum of line amounts after line discounts")
    discount_amount: float = Field(default=0.0, description="Document-level discount amount")
    amount_before_vat: float = Field(default=0.0, description="Taxable base")
    vat_amount: float = Field(default=0.0, description="VAT amount")
    total_amount: float = Field(default=0.0, description="Grand total")

    notes: str = Field(default="", description="Free-form notes")
    terms_conditions: str = Field(default="", description="Terms and conditions")

    status: DocumentStatus = Field(
        default=DocumentStatus.DRAFT,
        description="Lifecycle status"
    )

    issued_at: Optional[datetime] = Field(
        default=None,
        sa_type=Timestamp,
        description="Timestamp when the document left draft"
    )

    cancelled_at: Optional[datetime] = Field(
        default=None,
        sa_type=Timestamp,
        description="Timestamp when the document was cancelled"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=Timestamp,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=Timestamp,
        description="Last update timestamp"
    )


class DocumentItemFields(BaseModel):
    """
    Line item fields shared by quotation and invoice items

    Domain Rules:
    - Owned by exactly one document (document_id)
    - The whole item set is replaced on every save, item_order restarts at 1
    - amount = quantity * unit_price - discount_amount
    """

    item_order: int = Field(description="Position within the document, starting at 1")
    description: str = Field(default="", description="Item description")
    quantity: float = Field(default=0.0, description="Quantity")
    unit: str = Field(default="", description="Unit label")
    unit_price: float = Field(default=0.0, description="Unit price as entered")
    discount_percent: float = Field(default=0.0, description="Line discount in percent")
    discount_amount: float = Field(default=0.0, description="Line discount amount")
    amount: float = Field(default=0.0, description="Line amount after line discount")
    price_includes_vat: bool = Field(
        default=False,
        description="Whether unit_price already contains VAT"
    )
