import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from pizza_pricing.engine import DayOfWeek, PizzaOrder, PizzaType


def debug():
    order = PizzaOrder.new_dateless_order()
    
    print("--- Monday: Pepperoni discounted, Brie exempt ---")
    order.set_day(DayOfWeek.MONDAY)
    order.add(PizzaType.PEPPERONI, 2)
    order.add(PizzaType.BRIE_CHICKEN_AND_MUSHROOM, 1)
    print(f"Running total: {order.running_total}")
    
    print("\n--- Sunday: surcharge on new lines only ---")
    order.set_day(DayOfWeek.SUNDAY)
    order.add(PizzaType.MIGHTY_VEG, 3)
    print(f"Running total: {order.running_total}")
    print(f"Pizzas: {order.total_pizzas}, bonus multiplier: {order.bonus_multiplier()}")
    
    print("\nReceipt:")
    order.print_receipt()
    
    print("\nTrace:")
    print(order.get_trace_text())
    
    print("\nReceipt frame:")
    print(order.receipt_frame().to_string(index=False))

if __name__ == "__main__":
    debug()
