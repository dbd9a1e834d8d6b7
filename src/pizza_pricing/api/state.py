"""Shared engine instance for the API routers."""
from pizza_pricing.engine import PricingEngine

engine = PricingEngine()
