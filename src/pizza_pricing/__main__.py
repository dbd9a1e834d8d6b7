"""
Entry point: prints today's weekday.

Usage:
    python -m pizza_pricing
"""
import sys

from .engine import PricingEngine


def main(engine: PricingEngine = None) -> int:
    engine = engine or PricingEngine()
    print(engine.today())
    return 0


if __name__ == "__main__":
    sys.exit(main())
