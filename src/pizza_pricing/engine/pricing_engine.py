"""
Pricing Engine - order aggregate and line pricing.

Pricing rules:
- Each pizza type has a fixed unit price (see catalog.py)
- The day of the week scales unit prices (Monday 10% off, Sunday 5% surcharge)
- Brie, Chicken and Mushroom is never discounted on Mondays
- Orders of more than five pizzas get 5% off the grand total
"""
import numbers
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from ..logging import get_logger
from .catalog import daily_discount_multiplier, display_label, unit_price
from .clock import Clock, FixedClock, SystemClock
from .models import DayOfWeek, InvalidQuantity, OrderLine, PizzaType, Request, TraceStep


logger = get_logger(__name__)

# Day used by orders that do not consult a clock; its multiplier is 1.0
NEUTRAL_DAY = DayOfWeek.TUESDAY

BULK_THRESHOLD = 5
BULK_MULTIPLIER = 0.95


def _day_multiplier(day: DayOfWeek, pizza_type: PizzaType) -> float:
    if day == DayOfWeek.MONDAY and pizza_type == PizzaType.BRIE_CHICKEN_AND_MUSHROOM:
        return 1.0
    return daily_discount_multiplier(day)


def _check_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, numbers.Integral):
        raise InvalidQuantity(quantity)
    if quantity < 0:
        raise InvalidQuantity(quantity)
    return int(quantity)


class PizzaOrder:
    """
    A single pizza order.

    Lines are priced as they are added, under whatever day the order is set
    to at that moment. The bulk bonus is applied only when the total is read.
    Not safe for concurrent mutation.
    """

    def __init__(self, current_day: DayOfWeek = NEUTRAL_DAY):
        self.running_total = 0.0
        self.current_day = DayOfWeek(current_day)
        self.total_pizzas = 0
        self.lines: list[OrderLine] = []
        logger.debug("New order for %s", self.current_day)

    @classmethod
    def new_order(cls, clock: Optional[Clock] = None) -> 'PizzaOrder':
        """Create an order for today, as reported by the clock."""
        clock = clock or SystemClock()
        return cls(current_day=clock.today())

    @classmethod
    def new_dateless_order(cls) -> 'PizzaOrder':
        """Create an order that never looks at a clock and prices at multiplier 1.0."""
        return cls(current_day=NEUTRAL_DAY)

    def set_day(self, day: DayOfWeek):
        """Change the day used for lines added from now on."""
        self.current_day = DayOfWeek(day)

    def line_cost(self, pizza_type: PizzaType, quantity: int) -> float:
        """Cost of `quantity` pizzas of `pizza_type` if added right now."""
        pizza_type = PizzaType(pizza_type)
        return unit_price(pizza_type) * _day_multiplier(self.current_day, pizza_type) * quantity

    def add(self, pizza_type: PizzaType, quantity: int):
        """
        Add pizzas to the order.

        Raises:
            InvalidQuantity: if quantity is negative or not an integer. The
                order is left unchanged.
        """
        try:
            quantity = _check_quantity(quantity)
        except InvalidQuantity:
            logger.warning("Rejected quantity %r for %s", quantity, pizza_type)
            raise

        pizza_type = PizzaType(pizza_type)
        price = unit_price(pizza_type)
        multiplier = _day_multiplier(self.current_day, pizza_type)
        cost = self.line_cost(pizza_type, quantity)

        trace = [TraceStep("Unit Price", display_label(pizza_type), f"${price:.2f}")]
        if multiplier != daily_discount_multiplier(self.current_day):
            trace.append(TraceStep("Day Discount", f"Monday exemption for {display_label(pizza_type)}", f"×{multiplier}"))
        else:
            trace.append(TraceStep("Day Discount", f"{self.current_day} multiplier", f"×{multiplier}"))
        trace.append(TraceStep("Extension", f"Quantity {quantity} × ${price:.2f} × {multiplier}", f"${cost:.2f}"))

        self.lines.append(OrderLine(
            pizza_type=pizza_type,
            quantity=quantity,
            day=self.current_day,
            multiplier=multiplier,
            line_cost=cost,
            trace=tuple(trace),
        ))
        self.running_total += cost
        self.total_pizzas += quantity
        logger.debug("Added %d x %s on %s for %s", quantity, pizza_type.value, self.current_day, cost)

    def bonus_multiplier(self) -> float:
        """0.95 once the order holds more than five pizzas, otherwise 1.0."""
        if self.total_pizzas > BULK_THRESHOLD:
            return BULK_MULTIPLIER
        return 1.0

    def total(self) -> float:
        return self.running_total * self.bonus_multiplier()

    def receipt(self) -> list[str]:
        """One text line per addition, showing what was charged for it."""
        return [
            f"{line.quantity} {display_label(line.pizza_type)}: ${line.line_cost}"
            for line in self.lines
        ]

    def print_receipt(self, out: Callable[[str], None] = print):
        for text in self.receipt():
            out(text)

    def receipt_frame(self) -> pd.DataFrame:
        """Receipt as a DataFrame, one row per line."""
        return pd.DataFrame(
            [
                {
                    "Quantity": line.quantity,
                    "Pizza": display_label(line.pizza_type),
                    "Day": line.day.value,
                    "Multiplier": line.multiplier,
                    "Line Cost": line.line_cost,
                }
                for line in self.lines
            ],
            columns=["Quantity", "Pizza", "Day", "Multiplier", "Line Cost"],
        )

    def export_receipt(self, path: Optional[Path] = None, settings: Optional[Settings] = None) -> Path:
        """
        Write the receipt to CSV.

        Without a path, a timestamped file is created in the configured
        receipts directory.
        """
        if path is None:
            settings = settings or get_settings()
            settings.receipts_dir.mkdir(parents=True, exist_ok=True)
            path = settings.receipts_dir / f"receipt_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.csv"
        path = Path(path)
        self.receipt_frame().to_csv(path, index=False)
        logger.info("Receipt written to %s", path)
        return path

    def get_trace_text(self) -> str:
        """Get human-readable trace for the whole order."""
        parts = []
        for i, line in enumerate(self.lines, start=1):
            parts.append(f"Line {i} ({line.day}):")
            parts.append(line.get_trace_text())
        bonus = self.bonus_multiplier()
        if bonus != 1.0:
            parts.append(f"• Bulk Bonus: {self.total_pizzas} pizzas = ×{bonus}")
        else:
            parts.append(f"• Bulk Bonus: not applied ({self.total_pizzas} pizzas)")
        parts.append(f"• Total: ${self.total():.2f}")
        return "\n".join(parts)

    def to_dict(self) -> dict:
        return {
            "day": self.current_day.value,
            "lines": [
                {
                    "pizza_type": line.pizza_type.value,
                    "label": display_label(line.pizza_type),
                    "quantity": line.quantity,
                    "day": line.day.value,
                    "multiplier": line.multiplier,
                    "line_cost": line.line_cost,
                }
                for line in self.lines
            ],
            "running_total": self.running_total,
            "total_pizzas": self.total_pizzas,
            "bonus_multiplier": self.bonus_multiplier(),
            "total": self.total(),
        }


class PricingEngine:
    """
    Builds and prices orders.

    Holds the clock and settings so callers (API, UI, CLI) do not need to.
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None):
        self.settings = settings or get_settings()
        self.clock = clock or SystemClock()

    def today(self) -> DayOfWeek:
        return self.clock.today()

    def new_order(self) -> PizzaOrder:
        return PizzaOrder.new_order(self.clock)

    def new_dateless_order(self) -> PizzaOrder:
        return PizzaOrder.new_dateless_order()

    def calculate(self, request: Request) -> PizzaOrder:
        """
        Price a whole request in one go.

        Args:
            request: Request with the items and an optional day

        Returns:
            The filled PizzaOrder
        """
        if request.day is not None:
            order = PizzaOrder.new_order(FixedClock(request.day))
        else:
            order = self.new_order()

        for pizza_type, quantity in request.items:
            order.add(pizza_type, quantity)

        logger.info(
            "Quoted %d pizzas on %s: %.2f",
            order.total_pizzas, order.current_day, order.total(),
        )
        return order


# Function-style API over PizzaOrder

def new_order(clock: Optional[Clock] = None) -> PizzaOrder:
    return PizzaOrder.new_order(clock)


def new_dateless_order() -> PizzaOrder:
    return PizzaOrder.new_dateless_order()


def set_day(order: PizzaOrder, day: DayOfWeek):
    order.set_day(day)


def line_cost(order: PizzaOrder, pizza_type: PizzaType, quantity: int) -> float:
    return order.line_cost(pizza_type, quantity)


def add(order: PizzaOrder, pizza_type: PizzaType, quantity: int):
    order.add(pizza_type, quantity)


def bonus_multiplier(order: PizzaOrder) -> float:
    return order.bonus_multiplier()


def total(order: PizzaOrder) -> float:
    return order.total()


def receipt(order: PizzaOrder) -> list[str]:
    return order.receipt()
