from .discount_engine import DiscountEngine

__all__ = ["DiscountEngine"]
