"""
Amount grammar.

Accepts "3", "3.5", "1/2" and "1 1/2".
Rejects "", "abc", "-1", "1/0", "1/02", "1//2", "1 1 1/2".
"""

import re
from typing import Any, Literal, Optional

from ..errors import InvalidAmountFormat

AmountType = Literal["integer", "decimal", "fraction", "mixed"]

# One pattern, four named alternatives. The alternative that matched is the type.
AMOUNT_PATTERN = re.compile(
    r"(?P<mixed>[0-9]+\s+[0-9]+/[1-9][0-9]*)"
    r"|(?P<fraction>[0-9]+/[1-9][0-9]*)"
    r"|(?P<decimal>[0-9]+\.[0-9]+)"
    r"|(?P<integer>[0-9]+)"
)


def _match(value: Any) -> Optional[re.Match]:
    if not value or not isinstance(value, str):
        return None
    return AMOUNT_PATTERN.fullmatch(value.strip())


def is_valid_amount(value: Any) -> bool:
    """Check if a string is a valid amount. Never raises."""
    return _match(value) is not None


def detect_amount_type(value: Any) -> AmountType:
    """Detect the type of an amount string.

    Raises InvalidAmountFormat when no alternative matches.
    """
    m = _match(value)
    if m is None:
        raise InvalidAmountFormat(value)
    return m.lastgroup  # type: ignore[return-value]
