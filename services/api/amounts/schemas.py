"""Pydantic schemas for the Recipe Amounts API.

Request/response models for:
- Validation / classification
- Parsing
- Scaling (single amount and ingredient lists)
- Display formatting
"""

from typing import Optional

from pydantic import BaseModel, Field

from .parsing import AmountType, ParsedAmount


# --- Validate / Parse ---

class AmountIn(BaseModel):
    amount: Optional[str] = None


class AmountValidateOut(BaseModel):
    amount: Optional[str]
    valid: bool
    type: Optional[AmountType] = None


class AmountParseOut(BaseModel):
    amount: str
    parsed: ParsedAmount


# --- Scale ---

class AmountScaleRequest(BaseModel):
    amount: str = Field(..., min_length=1, max_length=50)
    new_servings: int = Field(..., ge=1)
    old_servings: int = Field(..., ge=1)


class AmountScaleResponse(BaseModel):
    amount: str
    scaled: str


class IngredientAmountIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    amount: Optional[str] = None
    unit: Optional[str] = None


class IngredientsScaleRequest(BaseModel):
    ingredients: list[IngredientAmountIn]
    new_servings: int = Field(..., ge=1)
    old_servings: int = Field(..., ge=1)


class IngredientsScaleResponse(BaseModel):
    servings: int
    ingredients: list[IngredientAmountIn]


# --- Format ---

class AmountFormatOut(BaseModel):
    amount: Optional[str]
    display: str
