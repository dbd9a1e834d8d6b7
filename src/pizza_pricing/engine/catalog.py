"""
Catalog and discount tables.

Both tables are fixed for the life of the process. They are checked against
their enums at import time so a new pizza or day cannot slip through unpriced.
"""
from types import MappingProxyType

from .models import DayOfWeek, PizzaType


UNIT_PRICES = MappingProxyType({
    PizzaType.PEPPERONI: 10.0,
    PizzaType.BRIE_CHICKEN_AND_MUSHROOM: 15.0,
    PizzaType.MIGHTY_VEG: 12.0,
})

DISPLAY_LABELS = MappingProxyType({
    PizzaType.PEPPERONI: "Pepperoni",
    PizzaType.BRIE_CHICKEN_AND_MUSHROOM: "Brie, Chicken and Mushroom",
    PizzaType.MIGHTY_VEG: "Mighty Veg",
})

DAILY_DISCOUNTS = MappingProxyType({
    DayOfWeek.MONDAY: 0.9,
    DayOfWeek.TUESDAY: 1.0,
    DayOfWeek.WEDNESDAY: 1.0,
    DayOfWeek.THURSDAY: 1.0,
    DayOfWeek.FRIDAY: 1.0,
    DayOfWeek.SATURDAY: 1.0,
    DayOfWeek.SUNDAY: 1.05,
})


def _check_exhaustive(table, enum_cls, name: str):
    """Fail loudly if a lookup table does not cover every member of its enum."""
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")


_check_exhaustive(UNIT_PRICES, PizzaType, "UNIT_PRICES")
_check_exhaustive(DISPLAY_LABELS, PizzaType, "DISPLAY_LABELS")
_check_exhaustive(DAILY_DISCOUNTS, DayOfWeek, "DAILY_DISCOUNTS")


def unit_price(pizza_type: PizzaType) -> float:
    """Price of a single pizza of the given type."""
    return UNIT_PRICES[PizzaType(pizza_type)]


def display_label(pizza_type: PizzaType) -> str:
    return DISPLAY_LABELS[PizzaType(pizza_type)]


def daily_discount_multiplier(day: DayOfWeek) -> float:
    """Multiplier applied to unit prices on the given day (Mon 0.9, Sun 1.05)."""
    return DAILY_DISCOUNTS[DayOfWeek(day)]
