"""
Amount Scaling Service.

Scales an amount by newServings / oldServings while keeping its notation:
- Integers stay integers, or become decimals when they don't divide evenly
- Decimals stay decimals (or integers when the result is whole)
- Fractions stay fractions (exact arithmetic, never decimal)
- Mixed numbers stay mixed numbers (or collapse to a fraction/integer)
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Dict, Iterable, List, Mapping, Union

from ..errors import AmountDivisionByZero, AmountError, InvalidAmountFormat
from ..parsing.amount_parser import (
    DecimalAmount,
    Fraction,
    FractionAmount,
    IntegerAmount,
    MixedAmount,
    ParsedAmount,
    parse_amount,
)
from .fraction_math import improper_to_mixed, mixed_to_improper, multiply_fractions

DECIMAL_PLACES = 4
_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)


def format_decimal(value: Union[float, Decimal]) -> str:
    """Round to 4 places (half away from zero), then drop trailing zeros.

    2.25 -> "2.25", 1.3333333 -> "1.3333", 4.50000001 -> "4.5"
    """
    exact = Decimal(value)
    if not exact.is_finite():
        raise InvalidAmountFormat(value)
    with localcontext() as ctx:
        ctx.prec = max(exact.adjusted(), 0) + DECIMAL_PLACES + 2
        text = format(exact.quantize(_QUANTUM, rounding=ROUND_HALF_UP), "f")
    return text.rstrip("0").rstrip(".")


def scale_amount(amount: str, new_servings: int, old_servings: int) -> str:
    """Scale an amount string from old_servings to new_servings.

    Unchanged servings return the input untouched (not even stripped), so
    re-saving an unscaled recipe never rewrites stored text.
    """
    if new_servings == old_servings:
        return amount

    parsed = parse_amount(amount)
    if old_servings == 0:
        raise AmountDivisionByZero()
    ratio = Fraction(numerator=new_servings, denominator=old_servings)

    try:
        return _scale_parsed(parsed, ratio)
    except AmountError:
        raise
    except (ArithmeticError, ValueError) as e:
        # results too large to render (float overflow, int digit limit)
        raise InvalidAmountFormat(amount) from e


def _quotient(numerator: int, denominator: int) -> Union[float, Decimal]:
    try:
        return numerator / denominator
    except OverflowError:
        with localcontext() as ctx:
            ctx.prec = len(str(numerator)) + DECIMAL_PLACES + 10
            return Decimal(numerator) / Decimal(denominator)


def _scale_parsed(parsed: ParsedAmount, ratio: Fraction) -> str:
    if isinstance(parsed, IntegerAmount):
        result = multiply_fractions(Fraction(numerator=parsed.value, denominator=1), ratio)
        if result.denominator == 1:
            return str(result.numerator)
        return format_decimal(_quotient(result.numerator, result.denominator))

    if isinstance(parsed, DecimalAmount):
        scaled = parsed.value * ratio.numerator / ratio.denominator
        if scaled.is_integer():
            return str(int(scaled))
        return format_decimal(scaled)

    if isinstance(parsed, FractionAmount):
        result = multiply_fractions(parsed.value, ratio)
        if result.denominator == 1:
            return str(result.numerator)
        return result.to_text()

    if isinstance(parsed, MixedAmount):
        improper = mixed_to_improper(parsed.whole, parsed.fraction)
        return improper_to_mixed(multiply_fractions(improper, ratio))

    raise TypeError(f"Unhandled amount type: {type(parsed).__name__}")


def scale_ingredients(
    ingredients: Iterable[Mapping[str, Any]],
    new_servings: int,
    old_servings: int,
) -> List[Dict[str, Any]]:
    """Scale the amount of every ingredient in a list.

    Ingredients without an amount ("to taste") are copied unchanged.
    The input mappings are never mutated.
    """
    scaled = []
    for ingredient in ingredients:
        item = dict(ingredient)
        amount = item.get("amount")
        if amount is not None and amount != "":
            item["amount"] = scale_amount(amount, new_servings, old_servings)
        scaled.append(item)
    return scaled
