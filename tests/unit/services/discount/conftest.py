import pytest

from services.discount.domain.registry.customer_benefit_registry import (
    CustomerBenefitRegistry,
)
from services.discount.domain.service.discount_engine import DiscountEngine


@pytest.fixture
def benefit_registry() -> CustomerBenefitRegistry:
    return CustomerBenefitRegistry.with_defaults()


@pytest.fixture
def discount_engine(benefit_registry, clock) -> DiscountEngine:
    return DiscountEngine(registry=benefit_registry, clock=clock)
