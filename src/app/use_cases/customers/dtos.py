"""Data Transfer Objects for Customer Use Cases"""

from typing import Optional
from pydantic import BaseModel, Field
from src.domain.customer import CustomerType
from src.app.use_cases.documents.dtos import DocumentFormDTO


class CustomerSnapshotDTO(BaseModel):
    """Customer fields copied from a document form"""

    customer_type: CustomerType = Field(default=CustomerType.COMPANY)
    name: str = Field(default="")
    tax_id: Optional[str] = None
    branch_code: str = Field(default="00000")
    address: Optional[str] = None
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_form(cls, form: DocumentFormDTO) -> "CustomerSnapshotDTO":
        return cls(
            name=form.customer_name,
            tax_id=form.customer_tax_id or None,
            branch_code=form.customer_branch_code or "00000",
            address=form.customer_address or None,
            contact_name=form.customer_contact or None,
            phone=form.customer_phone or None,
            email=form.customer_email or None,
        )


class CustomerResponseDTO(BaseModel):
    id: str
    company_id: str
    customer_type: CustomerType
    name: str
    tax_id: Optional[str] = None
    branch_code: str
    address: Optional[str] = None
    contact_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    created: bool = Field(default=False, description="True when a new entry was created")
    updated: bool = Field(default=False, description="True when an existing entry changed")
