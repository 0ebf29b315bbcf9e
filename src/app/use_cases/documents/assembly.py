"""Helpers shared by the document use cases

Copy form content onto header/item entities and build response DTOs.
"""

from typing import List
from src.domain.document import DocumentKind
from src.domain.lifecycle import KIND_RULES
from src.domain.registry import models_for
from src.domain.thai_baht import baht_text
from src.domain.totals import Discount, Totals, compute_totals, line_amounts
from .dtos import (
    DocumentFormDTO,
    DocumentResponseDTO,
    DocumentStatusResponseDTO,
    LineItemResponseDTO,
)


def totals_for(form: DocumentFormDTO) -> Totals:
    return compute_totals(
        form.items,
        Discount(type=form.discount_type, value=form.discount_value),
        form.vat_rate,
    )


def apply_form(document, kind: DocumentKind, form: DocumentFormDTO, totals: Totals) -> None:
    """Copy form fields and computed totals onto a document header"""
    document.customer_name = form.customer_name or "-"
    document.customer_address = form.customer_address or ""
    document.customer_tax_id = form.customer_tax_id or ""
    document.customer_branch_code = form.customer_branch_code or "00000"
    document.customer_contact = form.customer_contact or ""
    document.customer_phone = form.customer_phone or ""
    document.customer_email = form.customer_email or ""
    document.issue_date = form.issue_date

    date_field = KIND_RULES[kind].second_date_field
    setattr(document, date_field, getattr(form, date_field))

    document.vat_rate = form.vat_rate
    document.discount_type = form.discount_type
    document.discount_value = form.discount_value
    document.notes = form.notes or ""
    document.terms_conditions = form.terms_conditions or ""

    document.subtotal = totals.subtotal
    document.discount_amount = totals.discount_amount
    document.amount_before_vat = totals.amount_before_vat
    document.vat_amount = totals.vat_amount
    document.total_amount = totals.total_amount


def build_items(kind: DocumentKind, document_id: str, form: DocumentFormDTO) -> List:
    """Item entities for a form, numbered from 1 in form order"""
    _, item_model = models_for(kind)
    items = []
    for index, line in enumerate(form.items, start=1):
        discount_amount, amount = line_amounts(line)
        items.append(
            item_model(
                document_id=document_id,
                item_order=index,
                description=line.description,
                quantity=line.quantity,
                unit=line.unit,
                unit_price=line.unit_price,
                discount_percent=line.discount_percent or 0,
                discount_amount=discount_amount,
                amount=amount,
                price_includes_vat=line.price_includes_vat or False,
            )
        )
    return items


def to_response(kind: DocumentKind, document, items: List = ()) -> DocumentResponseDTO:
    return DocumentResponseDTO(
        id=document.id,
        kind=kind,
        company_id=document.company_id,
        document_number=document.document_number,
        status=document.status,
        customer_name=document.customer_name,
        customer_address=document.customer_address,
        customer_tax_id=document.customer_tax_id,
        customer_branch_code=document.customer_branch_code,
        customer_contact=document.customer_contact,
        customer_phone=document.customer_phone,
        customer_email=document.customer_email,
        issue_date=document.issue_date,
        due_date=getattr(document, "due_date", None),
        valid_until=getattr(document, "valid_until", None),
        vat_rate=document.vat_rate,
        discount_type=document.discount_type,
        discount_value=document.discount_value,
        subtotal=document.subtotal,
        discount_amount=document.discount_amount,
        amount_before_vat=document.amount_before_vat,
        vat_amount=document.vat_amount,
        total_amount=document.total_amount,
        total_amount_text=baht_text(document.total_amount),
        notes=document.notes,
        terms_conditions=document.terms_conditions,
        issued_at=document.issued_at,
        cancelled_at=document.cancelled_at,
        created_at=document.created_at,
        updated_at=document.updated_at,
        items=[
            LineItemResponseDTO(
                item_order=item.item_order,
                description=item.description,
                quantity=item.quantity,
                unit=item.unit,
                unit_price=item.unit_price,
                discount_percent=item.discount_percent,
                discount_amount=item.discount_amount,
                amount=item.amount,
                price_includes_vat=item.price_includes_vat,
            )
            for item in sorted(items, key=lambda i: i.item_order)
        ],
    )


def to_status_response(kind: DocumentKind, document) -> DocumentStatusResponseDTO:
    return DocumentStatusResponseDTO(
        id=document.id,
        kind=kind,
        document_number=document.document_number,
        status=document.status,
        cancelled_at=document.cancelled_at,
        updated_at=document.updated_at,
    )
