"""
Router for amount validation, scaling and display formatting.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..errors import AmountDivisionByZero, InvalidAmountFormat
from ..parsing import detect_amount_type, is_valid_amount, parse_amount
from ..schemas import (
    AmountFormatOut,
    AmountIn,
    AmountParseOut,
    AmountScaleRequest,
    AmountScaleResponse,
    AmountValidateOut,
    IngredientsScaleRequest,
    IngredientsScaleResponse,
)
from ..services.display import format_amount_for_display
from ..services.scaling import scale_amount, scale_ingredients

logger = logging.getLogger("amounts.api")

router = APIRouter()


def _invalid(e: InvalidAmountFormat) -> HTTPException:
    logger.info(f"Rejected amount {e.amount!r}")
    return HTTPException(status_code=422, detail=str(e))


@router.post("/validate", response_model=AmountValidateOut)
def validate_amount(req: AmountIn):
    """Check an amount and report its type when valid."""
    if not is_valid_amount(req.amount):
        return AmountValidateOut(amount=req.amount, valid=False)
    return AmountValidateOut(amount=req.amount, valid=True, type=detect_amount_type(req.amount))


@router.post("/parse", response_model=AmountParseOut)
def parse(req: AmountIn):
    try:
        parsed = parse_amount(req.amount)
    except InvalidAmountFormat as e:
        raise _invalid(e)
    return AmountParseOut(amount=req.amount, parsed=parsed)


@router.post("/scale", response_model=AmountScaleResponse)
def scale(req: AmountScaleRequest):
    """Scale one amount from old_servings to new_servings."""
    try:
        scaled = scale_amount(req.amount, req.new_servings, req.old_servings)
    except InvalidAmountFormat as e:
        raise _invalid(e)
    except AmountDivisionByZero as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AmountScaleResponse(amount=req.amount, scaled=scaled)


@router.post("/scale-ingredients", response_model=IngredientsScaleResponse)
def scale_ingredient_list(req: IngredientsScaleRequest):
    """Scale every ingredient of a recipe. Ingredients without an amount pass through."""
    try:
        scaled = scale_ingredients(
            [i.model_dump() for i in req.ingredients],
            req.new_servings,
            req.old_servings,
        )
    except InvalidAmountFormat as e:
        raise _invalid(e)
    except AmountDivisionByZero as e:
        raise HTTPException(status_code=400, detail=str(e))
    return IngredientsScaleResponse(servings=req.new_servings, ingredients=scaled)


@router.post("/format", response_model=AmountFormatOut)
def format_for_display(req: AmountIn):
    return AmountFormatOut(amount=req.amount, display=format_amount_for_display(req.amount))
