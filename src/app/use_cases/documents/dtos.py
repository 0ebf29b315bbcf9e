"""Data Transfer Objects for Document Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from typing import Optional, List
from pydantic import BaseModel, Field
from src.domain.document import DiscountType, DocumentKind, DocumentStatus


class LineItemDTO(BaseModel):
    """One line of a document form"""

    description: str = Field(default="", description="Item description")
    quantity: float = Field(default=1.0, ge=0, description="Quantity (>= 0)")
    unit: str = Field(default="", description="Unit label")
    unit_price: float = Field(default=0.0, description="Unit price as entered")
    discount_percent: float = Field(
        default=0.0,
        ge=0,
        le=100,
        description="Line discount in percent (0-100)"
    )
    price_includes_vat: bool = Field(
        default=False,
        description="Whether unit_price already contains VAT"
    )


class DocumentFormDTO(BaseModel):
    """
    Editable content of a quotation or invoice

    due_date is used by invoices, valid_until by quotations.
    """

    customer_name: str = Field(default="", description="Customer name")
    customer_address: str = Field(default="", description="Customer address")
    customer_tax_id: str = Field(default="", description="Customer tax id")
    customer_branch_code: str = Field(default="00000", description="Customer branch code")
    customer_contact: str = Field(default="", description="Contact person")
    customer_phone: str = Field(default="", description="Contact phone")
    customer_email: str = Field(default="", description="Contact email")

    issue_date: date = Field(..., description="Issue date")
    due_date: Optional[date] = Field(default=None, description="Invoice due date")
    valid_until: Optional[date] = Field(default=None, description="Quotation validity date")

    items: List[LineItemDTO] = Field(default_factory=list)

    vat_rate: float = Field(default=7.0, ge=0, description="VAT rate in percent")
    discount_type: DiscountType = Field(default=DiscountType.FIXED)
    discount_value: float = Field(default=0.0, description="Discount amount or percent")

    notes: str = Field(default="")
    terms_conditions: str = Field(default="")

    class Config:
        json_schema_extra = {
            "example": {
                "customer_name": "บริษัท ตัวอย่าง จำกัด",
                "customer_address": "99 ถนนสุขุมวิท กรุงเทพฯ 10110",
                "customer_tax_id": "0105551234567",
                "customer_branch_code": "00000",
                "issue_date": "2026-02-05",
                "due_date": "2026-03-07",
                "items": [
                    {"description": "Consulting", "quantity": 1, "unit": "job", "unit_price": 100}
                ],
                "vat_rate": 7,
                "discount_type": "fixed",
                "discount_value": 0,
            }
        }


class SaveDocumentCommandDTO(BaseModel):
    """
    Command DTO for creating or updating a document

    status is the status the document should have after the save:
    draft to keep editing, or an issue status of the kind.
    """

    company_id: str = Field(..., description="Owning company")
    status: DocumentStatus = Field(default=DocumentStatus.DRAFT)
    form: DocumentFormDTO


class LineItemResponseDTO(BaseModel):
    item_order: int
    description: str
    quantity: float
    unit: str
    unit_price: float
    discount_percent: float
    discount_amount: float
    amount: float
    price_includes_vat: bool


class DocumentResponseDTO(BaseModel):
    """
    Response DTO for a document

    Returned by create, update, get and list. items is empty in list results.
    """

    id: str
    kind: DocumentKind
    company_id: str
    document_number: str
    status: DocumentStatus

    customer_name: str
    customer_address: str
    customer_tax_id: str
    customer_branch_code: str
    customer_contact: str
    customer_phone: str
    customer_email: str

    issue_date: date
    due_date: Optional[date] = None
    valid_until: Optional[date] = None

    vat_rate: float
    discount_type: DiscountType
    discount_value: float

    subtotal: float
    discount_amount: float
    amount_before_vat: float
    vat_amount: float
    total_amount: float
    total_amount_text: str = Field(..., description="Grand total in Thai words")

    notes: str
    terms_conditions: str

    issued_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    items: List[LineItemResponseDTO] = Field(default_factory=list)


class DocumentStatusResponseDTO(BaseModel):
    """Response DTO for status-only changes (cancel)"""

    id: str
    kind: DocumentKind
    document_number: str
    status: DocumentStatus
    cancelled_at: Optional[datetime] = None
    updated_at: datetime


class ListDocumentsResponseDTO(BaseModel):
    documents: List[DocumentResponseDTO]
    limit: int
    offset: int
