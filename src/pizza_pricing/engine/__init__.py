"""Engine subpackage - catalog, clocks and order pricing."""
from .pricing_engine import (
    PricingEngine,
    PizzaOrder,
    new_order,
    new_dateless_order,
    set_day,
    line_cost,
    add,
    bonus_multiplier,
    total,
    receipt,
)
from .models import PizzaType, DayOfWeek, OrderLine, Request, InvalidQuantity
from .catalog import unit_price, display_label, daily_discount_multiplier
from .clock import Clock, SystemClock, FixedClock

__all__ = [
    'PricingEngine', 'PizzaOrder',
    'new_order', 'new_dateless_order', 'set_day', 'line_cost', 'add',
    'bonus_multiplier', 'total', 'receipt',
    'PizzaType', 'DayOfWeek', 'OrderLine', 'Request', 'InvalidQuantity',
    'unit_price', 'display_label', 'daily_discount_multiplier',
    'Clock', 'SystemClock', 'FixedClock',
]
