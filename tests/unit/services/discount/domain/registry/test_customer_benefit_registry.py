from datetime import date
from decimal import Decimal

from services.discount.domain.enum.customer_segment import CustomerSegment
from services.discount.domain.registry.customer_benefit_registry import (
    CustomerBenefitRegistry,
)


class TestCustomerBenefitRegistry:
    def test_default_vip_users(self):
        registry = CustomerBenefitRegistry.with_defaults()
        assert registry.vip_users() == frozenset(
            {"vip-user-1", "vip-user-2", "premium-customer"}
        )

    def test_default_promo_codes(self):
        registry = CustomerBenefitRegistry.with_defaults()
        assert registry.find_promo_code("SAVE20").discount_fraction == Decimal("0.20")
        assert registry.find_promo_code("UNKNOWN") is None

    def test_expired_sentinel_code_is_not_valid(self):
        registry = CustomerBenefitRegistry.with_defaults()
        assert not registry.find_promo_code("EXPIRED").is_valid_on(date(2025, 6, 2))

    def test_add_and_remove_vip_user(self):
        registry = CustomerBenefitRegistry()

        registry.add_vip_user("guest-9")
        assert registry.is_vip("guest-9")

        registry.remove_vip_user("guest-9")
        assert not registry.is_vip("guest-9")

    def test_remove_unknown_vip_is_noop(self):
        registry = CustomerBenefitRegistry()
        registry.remove_vip_user("nobody")
        assert registry.vip_users() == frozenset()

    def test_add_promo_code_overwrites_existing(self):
        registry = CustomerBenefitRegistry.with_defaults()

        promo = registry.add_promo_code("WELCOME10", "0.15", expires_on=date(2025, 12, 31))

        assert registry.find_promo_code("WELCOME10") == promo
        assert promo.discount_fraction == Decimal("0.15")
        assert promo.expires_on == date(2025, 12, 31)


class TestCustomerSegment:
    def test_infer_from_user_id(self):
        assert CustomerSegment.infer_from_user_id("new-123") == CustomerSegment.FIRST_TIME
        assert CustomerSegment.infer_from_user_id("firstbooker") == (
            CustomerSegment.FIRST_TIME
        )
        assert CustomerSegment.infer_from_user_id("renew-123") == (
            CustomerSegment.RETURNING
        )
