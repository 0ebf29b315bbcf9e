"""Invoice Domain Entity

Tax invoices (ใบกำกับภาษี) and their line items.
"""

from datetime import date
from typing import Optional
from sqlmodel import Field
from src.domain.base import generate_uuid
from src.domain.document import DocumentHeader, DocumentItemFields


class Invoice(DocumentHeader, table=True):
    """
    Invoice - Tax invoice issued to a customer

    Domain Rules:
    - Status transitions: draft -> issued -> cancelled
    - Numbered with the company invoice prefix (default IV)
    - due_date is optional
    """

    __tablename__ = "invoices"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque invoice identifier"
    )

    due_date: Optional[date] = Field(
        default=None,
        description="Payment due date"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "company_id": "company_abc",
                "document_number": "IV-20260205-0001",
                "customer_name": "บริษัท ตัวอย่าง จำกัด",
                "issue_date": "2026-02-05",
                "due_date": "2026-03-07",
                "vat_rate": 7.0,
                "subtotal": 100.0,
                "amount_before_vat": 100.0,
                "vat_amount": 7.0,
                "total_amount": 107.0,
                "status": "issued",
            }
        }


class InvoiceItem(DocumentItemFields, table=True):
    """Invoice Item - Line item of an invoice"""

    __tablename__ = "invoice_items"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque item identifier"
    )

    document_id: str = Field(
        foreign_key="invoices.id",
        index=True,
        description="Foreign key to Invoice"
    )
