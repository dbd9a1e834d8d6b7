"""
Pizza Pricing Package

Prices pizza orders from a fixed catalog, a day-of-week discount schedule
and a bulk-order bonus discount.
"""

__version__ = "1.0.0"
