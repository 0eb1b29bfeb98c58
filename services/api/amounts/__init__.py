"""Parsing, exact scaling and display formatting of recipe ingredient amounts."""

from .errors import AmountError, InvalidAmountFormat, AmountDivisionByZero
from .parsing import (
    AmountType,
    Fraction,
    ParsedAmount,
    IntegerAmount,
    DecimalAmount,
    FractionAmount,
    MixedAmount,
    is_valid_amount,
    detect_amount_type,
    parse_amount,
)
from .services.fraction_math import gcd, simplify_fraction, multiply_fractions
from .services.scaling import scale_amount, scale_ingredients, format_decimal
from .services.display import format_amount_for_display, amount_from_import, is_amount_invalid

__all__ = [
    # Errors
    "AmountError",
    "InvalidAmountFormat",
    "AmountDivisionByZero",
    # Types
    "AmountType",
    "Fraction",
    "ParsedAmount",
    "IntegerAmount",
    "DecimalAmount",
    "FractionAmount",
    "MixedAmount",
    # Grammar / parsing
    "is_valid_amount",
    "detect_amount_type",
    "parse_amount",
    # Arithmetic
    "gcd",
    "simplify_fraction",
    "multiply_fractions",
    # Scaling / display
    "scale_amount",
    "scale_ingredients",
    "format_decimal",
    "format_amount_for_display",
    "amount_from_import",
    "is_amount_invalid",
]
