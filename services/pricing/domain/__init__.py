from .enum import Season
from .registry import RateTable
from .service import PricingEngine

__all__ = ["Season", "RateTable", "PricingEngine"]
