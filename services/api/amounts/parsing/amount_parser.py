import math
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidAmountFormat
from .grammar import detect_amount_type, is_valid_amount


class Fraction(BaseModel):
    model_config = ConfigDict(frozen=True)

    numerator: int = Field(..., ge=0)
    denominator: int = Field(..., ge=1)

    def to_text(self) -> str:
        return f"{self.numerator}/{self.denominator}"


class IntegerAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["integer"] = "integer"
    value: int = Field(..., ge=0)

    def to_text(self) -> str:
        return str(self.value)


class DecimalAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["decimal"] = "decimal"
    value: float = Field(..., ge=0, allow_inf_nan=False)

    def to_text(self) -> str:
        text = repr(self.value)
        if "e" in text or "E" in text:
            text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
        return text


class FractionAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["fraction"] = "fraction"
    value: Fraction

    def to_text(self) -> str:
        return self.value.to_text()


class MixedAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["mixed"] = "mixed"
    whole: int = Field(..., ge=0)
    fraction: Fraction

    def to_text(self) -> str:
        return f"{self.whole} {self.fraction.to_text()}"


ParsedAmount = Annotated[
    Union[IntegerAmount, DecimalAmount, FractionAmount, MixedAmount],
    Field(discriminator="type"),
]


def _parse_fraction(text: str) -> Fraction:
    num, denom = text.split("/", 1)
    return Fraction(numerator=int(num, 10), denominator=int(denom, 10))


def parse_amount(value: str) -> ParsedAmount:
    """Parse an amount string into its structured representation.

    Fractions are kept as written, not simplified.
    Raises InvalidAmountFormat for anything the grammar rejects.
    """
    if not is_valid_amount(value):
        raise InvalidAmountFormat(value)

    trimmed = value.strip()
    try:
        return _parse_valid(trimmed, detect_amount_type(trimmed))
    except InvalidAmountFormat:
        raise
    except ValueError as e:
        # int() digit limit, or a value the models refuse
        raise InvalidAmountFormat(value) from e


def _parse_valid(trimmed: str, amount_type: str) -> ParsedAmount:
    if amount_type == "integer":
        return IntegerAmount(value=int(trimmed, 10))

    if amount_type == "decimal":
        value = float(trimmed)
        if not math.isfinite(value):
            raise InvalidAmountFormat(trimmed)
        return DecimalAmount(value=value)

    if amount_type == "fraction":
        return FractionAmount(value=_parse_fraction(trimmed))

    if amount_type == "mixed":
        whole_part, fraction_part = trimmed.split(None, 1)
        return MixedAmount(whole=int(whole_part, 10), fraction=_parse_fraction(fraction_part))

    raise InvalidAmountFormat(trimmed)
