from .grammar import AMOUNT_PATTERN, AmountType, is_valid_amount, detect_amount_type
from .amount_parser import (
    Fraction,
    IntegerAmount,
    DecimalAmount,
    FractionAmount,
    MixedAmount,
    ParsedAmount,
    parse_amount,
)

__all__ = ["AMOUNT_PATTERN", "AmountType", "is_valid_amount", "detect_amount_type", "Fraction", "IntegerAmount", "DecimalAmount", "FractionAmount", "MixedAmount", "ParsedAmount", "parse_amount"]
