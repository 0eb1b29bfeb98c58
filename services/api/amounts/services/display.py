"""
Display normalization for stored amounts.

Also coerces amounts arriving from structured imports into stored text.
"""

import math
import re
from decimal import Decimal
from typing import Any, Optional

from ..errors import InvalidAmountFormat
from ..parsing.grammar import is_valid_amount

_TRAILING_ZEROS = re.compile(r"\.?0+$")


def strip_trailing_zeros(text: str) -> str:
    """3.50 -> 3.5, 2.00 -> 2. Only meant for strings with a decimal point."""
    return _TRAILING_ZEROS.sub("", text, count=1)


def format_amount_for_display(amount: Optional[str]) -> str:
    """Format a stored amount for display.

    Decimals lose trailing zeros; integers, fractions and mixed numbers
    are returned as-is. Idempotent and never raises.
    """
    if amount is None or amount == "":
        return ""

    trimmed = amount.strip()

    if "." in trimmed and "/" not in trimmed:
        return strip_trailing_zeros(trimmed)

    return trimmed


def is_amount_invalid(amount: Optional[str]) -> bool:
    """Editor check: no amount is fine, anything else must be a valid amount."""
    return amount is not None and amount != "" and not is_valid_amount(amount)


def amount_from_import(value: Any) -> Optional[str]:
    """Coerce an imported amount (number, string or null) into stored text."""
    if value is None:
        return None

    # bool is an int subclass; true/false is never a quantity
    if isinstance(value, bool):
        raise InvalidAmountFormat(value)

    if isinstance(value, int):
        if value < 0:
            raise InvalidAmountFormat(value)
        return str(value)

    if isinstance(value, float):
        if not math.isfinite(value) or value < 0:
            raise InvalidAmountFormat(value)
        if value.is_integer():
            return str(int(value))
        text = format(Decimal(repr(value)), "f")
        return strip_trailing_zeros(text)

    if isinstance(value, str):
        if not is_valid_amount(value):
            raise InvalidAmountFormat(value)
        return value

    raise InvalidAmountFormat(value)
