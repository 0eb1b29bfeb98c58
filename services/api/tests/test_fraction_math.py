import pytest

from amounts.errors import AmountDivisionByZero
from amounts.parsing import Fraction
from amounts.services.fraction_math import (
    gcd,
    improper_to_mixed,
    mixed_to_improper,
    multiply_fractions,
    simplify_fraction,
)


def test_gcd_common_cases():
    assert gcd(8, 12) == 4
    assert gcd(12, 8) == 4
    assert gcd(7, 11) == 1
    assert gcd(6, 9) == 3
    assert gcd(4, 8) == 4
    assert gcd(5, 5) == 5


def test_gcd_zero():
    assert gcd(0, 5) == 5
    assert gcd(5, 0) == 5


def test_gcd_uses_absolute_values():
    assert gcd(-8, 12) == 4


def test_gcd_large_inputs():
    assert gcd(2**61 - 1, 2**31 - 1) == 1
    assert gcd(10**30, 10**20) == 10**20


def test_simplify_fraction():
    assert simplify_fraction(4, 8) == (1, 2)
    assert simplify_fraction(6, 9) == (2, 3)
    assert simplify_fraction(12, 4) == (3, 1)
    assert simplify_fraction(1, 3) == (1, 3)
    assert simplify_fraction(0, 7) == (0, 1)


def test_simplify_division_by_zero():
    with pytest.raises(AmountDivisionByZero, match="Division by zero"):
        simplify_fraction(1, 0)
    with pytest.raises(ZeroDivisionError):
        simplify_fraction(1, 0)


def test_multiply_fractions():
    result = multiply_fractions(Fraction(numerator=1, denominator=2), Fraction(numerator=2, denominator=3))
    assert result == Fraction(numerator=1, denominator=3)


def test_multiply_fractions_whole_result():
    result = multiply_fractions(Fraction(numerator=2, denominator=1), Fraction(numerator=3, denominator=1))
    assert result == Fraction(numerator=6, denominator=1)


def test_multiply_fractions_reduces():
    result = multiply_fractions(Fraction(numerator=3, denominator=2), Fraction(numerator=4, denominator=6))
    assert result == Fraction(numerator=1, denominator=1)


def test_mixed_to_improper():
    assert mixed_to_improper(1, Fraction(numerator=1, denominator=2)) == Fraction(numerator=3, denominator=2)
    assert mixed_to_improper(2, Fraction(numerator=1, denominator=4)) == Fraction(numerator=9, denominator=4)


def test_improper_to_mixed():
    assert improper_to_mixed(Fraction(numerator=3, denominator=2)) == "1 1/2"
    assert improper_to_mixed(Fraction(numerator=6, denominator=4)) == "1 1/2"
    assert improper_to_mixed(Fraction(numerator=1, denominator=2)) == "1/2"
    assert improper_to_mixed(Fraction(numerator=8, denominator=4)) == "2"
    assert improper_to_mixed(Fraction(numerator=0, denominator=3)) == "0"
