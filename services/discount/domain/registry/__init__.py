from .customer_benefit_registry import CustomerBenefitRegistry

__all__ = ["CustomerBenefitRegistry"]
