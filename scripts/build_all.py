#!/usr/bin/env python
"""
Check pipeline - prints the price tables and runs the test suite.

Usage:
    python scripts/build_all.py
"""
import sys
from pathlib import Path

import pandas as pd

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from pizza_pricing.engine import (
    DayOfWeek,
    PizzaType,
    daily_discount_multiplier,
    display_label,
    unit_price,
)


def main():
    print("=" * 60)
    print("PIZZA PRICING CHECK PIPELINE")
    print("=" * 60)
    print()
    
    # Price tables
    print("[1/2] Price tables...")
    menu = pd.DataFrame(
        [{"Pizza": display_label(p), "Unit Price": unit_price(p)} for p in PizzaType]
    )
    days = pd.DataFrame(
        [{"Day": d.value, "Multiplier": daily_discount_multiplier(d)} for d in DayOfWeek]
    )
    print(menu.to_string(index=False))
    print()
    print(days.to_string(index=False))
    
    print()
    print("[2/2] Running tests...")
    
    # Run tests
    import subprocess
    test_result = subprocess.run(
        [sys.executable, '-m', 'pytest', 'tests', '-v', '--tb=short'],
        cwd=Path(__file__).parent.parent
    )
    
    if test_result.returncode != 0:
        print("\n❌ TESTS FAILED")
        sys.exit(1)
    
    print()
    print("=" * 60)
    print("✅ CHECK COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
