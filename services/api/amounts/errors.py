"""Errors raised by the amount engine."""

from typing import Any


class AmountError(Exception):
    """Base exception for amount-related errors."""
    pass


class InvalidAmountFormat(AmountError, ValueError):
    """Amount text matches none of the supported shapes."""

    def __init__(self, amount: Any):
        self.amount = amount
        super().__init__(f"Invalid amount format: {amount!r}")


class AmountDivisionByZero(AmountError, ZeroDivisionError):
    """A zero denominator reached fraction simplification."""

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)
