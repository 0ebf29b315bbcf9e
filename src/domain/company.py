"""Company Domain Entity

The issuing company and its document numbering settings.
"""

from datetime import datetime
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid, Timestamp, utc_now
from src.domain.document import DocumentKind


class Company(BaseModel, table=True):
    """
    Company - Issuer of quotations and invoices

    Domain Rules:
    - invoice_prefix / quotation_prefix feed the number allocator
    """

    __tablename__ = "companies"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Company identifier"
    )

    name: str = Field(description="Registered company name")
    tax_id: str = Field(default="", description="Company tax identification number")
    branch_code: str = Field(default="00000", description="Branch code (00000 = head office)")
    address: str = Field(default="", description="Registered address")

    invoice_prefix: str = Field(default="IV", max_length=10, description="Invoice number prefix")
    quotation_prefix: str = Field(default="QT", max_length=10, description="Quotation number prefix")

    created_at: datetime = Field(default_factory=utc_now, sa_type=Timestamp)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=Timestamp)

    def prefix_for(self, kind: DocumentKind) -> str:
        if kind == DocumentKind.INVOICE:
            return self.invoice_prefix
        return self.quotation_prefix
