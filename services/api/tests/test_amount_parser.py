import pytest

from amounts.errors import InvalidAmountFormat
from amounts.parsing import (
    DecimalAmount,
    Fraction,
    FractionAmount,
    IntegerAmount,
    MixedAmount,
    detect_amount_type,
    parse_amount,
)


def test_parse_integers():
    assert parse_amount("3") == IntegerAmount(value=3)
    assert parse_amount("42") == IntegerAmount(value=42)
    # leading zeros are accepted as text
    assert parse_amount("007") == IntegerAmount(value=7)


def test_parse_decimals():
    assert parse_amount("3.5") == DecimalAmount(value=3.5)
    assert parse_amount("0.25") == DecimalAmount(value=0.25)


def test_parse_fractions_not_simplified():
    assert parse_amount("1/2") == FractionAmount(value=Fraction(numerator=1, denominator=2))
    assert parse_amount("2/4") == FractionAmount(value=Fraction(numerator=2, denominator=4))


def test_parse_mixed_numbers():
    assert parse_amount("1 1/2") == MixedAmount(whole=1, fraction=Fraction(numerator=1, denominator=2))
    assert parse_amount("2  3/4") == MixedAmount(whole=2, fraction=Fraction(numerator=3, denominator=4))


def test_mixed_keeps_improper_fraction_part():
    parsed = parse_amount("1 5/4")
    assert parsed.whole == 1
    assert parsed.fraction == Fraction(numerator=5, denominator=4)


def test_parse_raises_on_invalid():
    for bad in ["abc", "", "1/0", "1 1 1/2", None]:
        with pytest.raises(InvalidAmountFormat):
            parse_amount(bad)


def test_invalid_format_message():
    with pytest.raises(InvalidAmountFormat, match="Invalid amount format"):
        parse_amount("abc")


def test_invalid_format_is_value_error():
    with pytest.raises(ValueError):
        parse_amount("-1")


def test_parsed_amount_is_frozen():
    parsed = parse_amount("3")
    with pytest.raises(Exception):
        parsed.value = 4


def test_to_text_round_trips_to_same_type():
    for text in ["3", "007", "3.5", "0.25", "1/2", "2/4", "1 1/2", "1 5/4"]:
        parsed = parse_amount(text)
        assert detect_amount_type(parsed.to_text()) == parsed.type


def test_decimal_to_text():
    assert DecimalAmount(value=3.5).to_text() == "3.5"
    assert DecimalAmount(value=2.0).to_text() == "2.0"
    assert DecimalAmount(value=0.00001).to_text() == "0.00001"


def test_parse_integer_past_digit_limit_is_invalid():
    with pytest.raises(InvalidAmountFormat):
        parse_amount("1" * 5000)
    with pytest.raises(InvalidAmountFormat):
        parse_amount("1" * 5000 + " 1/2")


def test_parse_decimal_past_float_range_is_invalid():
    with pytest.raises(InvalidAmountFormat):
        parse_amount("1" * 400 + ".5")


def test_parse_large_integer_within_limits():
    assert parse_amount("1" * 400) == IntegerAmount(value=int("1" * 400))
