from .enum import CustomerSegment
from .registry import CustomerBenefitRegistry
from .service import DiscountEngine
from .value_object import PromoCode

__all__ = ["CustomerSegment", "PromoCode", "CustomerBenefitRegistry", "DiscountEngine"]
