import sys
import os

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from pizza_pricing.engine import PizzaOrder


@pytest.fixture
def order():
    """A fresh order that prices at multiplier 1.0."""
    return PizzaOrder.new_dateless_order()
