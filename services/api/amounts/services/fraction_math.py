"""
Exact fraction arithmetic for amount scaling.

No floating point is involved; results are always reduced.
"""

from typing import Tuple

from ..errors import AmountDivisionByZero
from ..parsing.amount_parser import Fraction


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (Euclid). gcd(0, n) == gcd(n, 0) == n."""
    a = abs(round(a))
    b = abs(round(b))
    while b:
        a, b = b, a % b
    return a


def simplify_fraction(numerator: int, denominator: int) -> Tuple[int, int]:
    """Reduce a fraction to lowest terms. Returns (numerator, denominator)."""
    if denominator == 0:
        raise AmountDivisionByZero()
    divisor = gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor


def multiply_fractions(a: Fraction, b: Fraction) -> Fraction:
    """Multiply two fractions and return the reduced product."""
    num, denom = simplify_fraction(
        a.numerator * b.numerator,
        a.denominator * b.denominator,
    )
    return Fraction(numerator=num, denominator=denom)


def mixed_to_improper(whole: int, fraction: Fraction) -> Fraction:
    """1 1/2 -> 3/2"""
    return Fraction(
        numerator=whole * fraction.denominator + fraction.numerator,
        denominator=fraction.denominator,
    )


def improper_to_mixed(fraction: Fraction) -> str:
    """Render a fraction in its most compact form: "3", "1/2" or "1 1/2"."""
    num, denom = simplify_fraction(fraction.numerator, fraction.denominator)

    if denom == 1:
        return str(num)

    if num < denom:
        return f"{num}/{denom}"

    whole, remainder = divmod(num, denom)
    if remainder == 0:
        return str(whole)

    return f"{whole} {remainder}/{denom}"
