from .pricing_engine import PricingEngine

__all__ = ["PricingEngine"]
