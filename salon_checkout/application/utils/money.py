from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Quantize to currency precision. Presentation only; never feed back into arithmetic."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_price(amount: Decimal, symbol: str = "$") -> str:
    return f"{symbol}{to_cents(amount)}"


def parse_price(text: str | None) -> Decimal:
    """Parse a display price such as "$35" or "35.00 CAD". Unparseable text is 0."""
    cleaned = re.sub(r"[^0-9.\-]", "", text or "")
    if not cleaned:
        return Decimal("0")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
