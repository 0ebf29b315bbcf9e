"""Money/VAT Calculator

Turns a document's line items, discount configuration and VAT rate into
the persisted totals breakdown. Items may mix VAT-inclusive and
VAT-exclusive unit prices; the document discount is spread over both
groups in proportion to their share of the subtotal.

All arithmetic is float and unrounded. Rounding to satang happens only
when formatting for display (format_money, baht_text).
"""

from typing import Iterable, Protocol, Tuple
from pydantic import BaseModel
from src.domain.document import DiscountType


class PricedLine(Protocol):
    quantity: float
    unit_price: float
    discount_percent: float
    price_includes_vat: bool


class Discount(BaseModel):
    """Document-level discount configuration"""

    type: DiscountType = DiscountType.FIXED
    value: float = 0.0


class Totals(BaseModel):
    """Totals breakdown persisted on the document header"""

    subtotal: float = 0.0
    discount_amount: float = 0.0
    amount_before_vat: float = 0.0
    vat_amount: float = 0.0
    total_amount: float = 0.0


def line_amounts(item: PricedLine) -> Tuple[float, float]:
    """Return (line discount amount, line amount after line discount)"""
    gross = item.quantity * item.unit_price
    discount = gross * ((item.discount_percent or 0) / 100)
    return discount, gross - discount


def compute_totals(items: Iterable[PricedLine], discount: Discount, vat_rate: float) -> Totals:
    items = list(items)

    display_total = 0.0
    for item in items:
        display_total += line_amounts(item)[1]

    if discount.type == DiscountType.PERCENT:
        discount_amount = display_total * (discount.value / 100)
    else:
        # Fixed discounts are not clamped; totals may go negative
        discount_amount = discount.value

    display_after_discount = display_total - discount_amount
    discount_ratio = display_after_discount / display_total if display_total > 0 else 1

    total_inc_vat = 0.0
    total_exc_vat = 0.0
    for item in items:
        after_all_discounts = line_amounts(item)[1] * discount_ratio
        if item.price_includes_vat:
            total_inc_vat += after_all_discounts
        else:
            total_exc_vat += after_all_discounts

    # Inclusive prices already carry VAT: back it out
    amount_before_vat_from_inc = total_inc_vat / (1 + vat_rate / 100)
    vat_from_inc = total_inc_vat - amount_before_vat_from_inc

    # Exclusive prices get VAT added on top
    vat_from_exc = total_exc_vat * (vat_rate / 100)

    return Totals(
        subtotal=display_total,
        discount_amount=discount_amount,
        amount_before_vat=amount_before_vat_from_inc + total_exc_vat,
        vat_amount=vat_from_inc + vat_from_exc,
        total_amount=total_inc_vat + total_exc_vat + vat_from_exc,
    )


def format_money(value: float) -> str:
    """Display format: two decimals with thousands separators (1,234.50)"""
    return f"{value:,.2f}"
