"""Thai reading of money amounts

Tax documents print the grand total in words, e.g. 107.00 ->
"หนึ่งร้อยเจ็ดบาทถ้วน". Display only: the amount is rounded to satang here
and the rounded value never flows back into stored totals.
"""

from decimal import Decimal, ROUND_HALF_UP
from num2words import num2words


def baht_text(amount: float) -> str:
    """
    Spell an amount in Thai baht and satang

    Args:
        amount: Amount in baht, any precision

    Returns:
        Thai text such as "หนึ่งพันสองร้อยบาทห้าสิบสตางค์"
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if value == 0:
        return "ศูนย์บาทถ้วน"
    if value < 0:
        return "ลบ" + baht_text(float(-value))
    whole = value == value.to_integral_value()
    return num2words(int(value) if whole else float(value), lang="th", to="currency")
