"""
Data models for the pricing engine.

Enums for the closed catalog and week, dataclasses for order lines and
quote requests.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class InvalidQuantity(ValueError):
    """Raised when a line is added with a negative or non-integer quantity."""

    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"Quantity must be a non-negative integer, got {quantity!r}")


class PizzaType(str, Enum):
    """Pizzas on the menu."""
    PEPPERONI = "pepperoni"
    BRIE_CHICKEN_AND_MUSHROOM = "brie_chicken_and_mushroom"
    MIGHTY_VEG = "mighty_veg"


class DayOfWeek(str, Enum):
    """Days of the week, valued by their short names."""
    MONDAY = "Mon"
    TUESDAY = "Tue"
    WEDNESDAY = "Wed"
    THURSDAY = "Thu"
    FRIDAY = "Fri"
    SATURDAY = "Sat"
    SUNDAY = "Sun"

    @classmethod
    def from_weekday(cls, weekday: int) -> 'DayOfWeek':
        """Map datetime.weekday() (Monday == 0) to a DayOfWeek."""
        return list(cls)[weekday]

    @classmethod
    def parse(cls, text: str) -> 'DayOfWeek':
        """
        Parse a day from its short name, full name or enum name.

        Accepts "Mon", "monday" and "MONDAY" alike.
        """
        key = str(text).strip().lower()
        for day in cls:
            if key in (day.value.lower(), day.name.lower()):
                return day
        raise ValueError(f"Unknown day of week: {text!r}")

    def __str__(self) -> str:
        return self.value


@dataclass
class TraceStep:
    """A single step in the pricing trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class OrderLine:
    """
    A single addition to an order.

    The day, multiplier and cost are captured when the line is added, so the
    line keeps the price that was charged even if the order's day changes later.
    """
    pizza_type: PizzaType
    quantity: int
    day: DayOfWeek
    multiplier: float
    line_cost: float
    trace: tuple = field(default_factory=tuple)

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


@dataclass
class Request:
    """A quote request: the pizzas wanted and, optionally, the day to price on."""
    items: list[tuple[PizzaType, int]]
    day: Optional[DayOfWeek] = None  # None means ask the clock
