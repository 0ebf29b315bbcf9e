"""Quotation Domain Entity

Quotations (ใบเสนอราคา) and their line items.
"""

from datetime import date
from typing import Optional
from sqlmodel import Field
from src.domain.base import generate_uuid
from src.domain.document import DocumentHeader, DocumentItemFields


class Quotation(DocumentHeader, table=True):
    """
    Quotation - Price offer sent to a customer

    Domain Rules:
    - Status transitions: draft -> pending/sent -> cancelled
    - pending/sent -> converted happens outside this service
    - Numbered with the company quotation prefix (default QT)
    """

    __tablename__ = "quotations"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque quotation identifier"
    )

    valid_until: Optional[date] = Field(
        default=None,
        description="Last day the offer is valid"
    )


class QuotationItem(DocumentItemFields, table=True):
    """Quotation Item - Line item of a quotation"""

    __tablename__ = "quotation_items"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque item identifier"
    )

    document_id: str = Field(
        foreign_key="quotations.id",
        index=True,
        description="Foreign key to Quotation"
    )
