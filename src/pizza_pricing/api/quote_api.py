"""
Quote API - FastAPI router for catalog lookups and order quotes.
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator
from typing import List, Optional

from ..engine import (
    DayOfWeek,
    InvalidQuantity,
    PizzaType,
    Request,
    daily_discount_multiplier,
    display_label,
    unit_price,
)
from . import state

router = APIRouter(tags=["quotes"])


# Pydantic models for API
class QuoteLine(BaseModel):
    """A pizza type and how many of it."""
    pizza_type: PizzaType
    quantity: int


class QuoteRequest(BaseModel):
    """Request model for pricing an order."""
    day: Optional[DayOfWeek] = None
    lines: List[QuoteLine] = []

    @field_validator("day", mode="before")
    @classmethod
    def parse_day(cls, value):
        if value is None or isinstance(value, DayOfWeek):
            return value
        return DayOfWeek.parse(value)


@router.get("/catalog")
async def get_catalog():
    return {
        pizza_type.value: {
            "label": display_label(pizza_type),
            "unit_price": unit_price(pizza_type),
        }
        for pizza_type in PizzaType
    }


@router.get("/discounts")
async def get_discounts():
    return {day.value: daily_discount_multiplier(day) for day in DayOfWeek}


@router.post("/quote")
async def create_quote(req: QuoteRequest):
    request = Request(
        items=[(line.pizza_type, line.quantity) for line in req.lines],
        day=req.day,
    )
    try:
        order = state.engine.calculate(request)
    except InvalidQuantity as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = order.to_dict()
    result["receipt"] = order.receipt()
    return result
