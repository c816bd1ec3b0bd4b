from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from services.discount.domain.enum.customer_segment import CustomerSegment
from services.discount.domain.registry.customer_benefit_registry import (
    CustomerBenefitRegistry,
)
from services.shared.utils.decimals import ceil_to_cent, round_half_up, to_decimal
from services.shared.utils.logger import get_logger

logger = get_logger("discount")

ZERO = Decimal("0.00")

VIP_FACTOR = Decimal("0.90")
FIRST_TIME_FACTOR = Decimal("0.95")
LONG_STAY_FACTOR = Decimal("0.85")
WEEKEND_STAY_FACTOR = Decimal("0.92")

LONG_STAY_MIN_NIGHTS = 7
# 金・土・日
WEEKEND_CHECK_IN_DAYS = frozenset({4, 5, 6})

MAX_DISCOUNT_RATE = Decimal("0.60")
MINIMUM_PRICE = Decimal("10.0")


class DiscountEngine:
    """顧客向け割引のドメインサービス

    条件を満たした割引係数を固定順（VIP → 初回 → プロモ → 長期 → 週末）で
    掛け合わせ、最後に割引上限 60% と最低価格 10.0 を適用する。
    """

    def __init__(
        self,
        registry: CustomerBenefitRegistry,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._registry = registry
        self._clock = clock

    def apply_discount(
        self,
        user_id: str,
        base_price: Decimal | float | int,
        promo_code: Optional[str] = None,
        check_in: Optional[date] = None,
        check_out: Optional[date] = None,
        segment: Optional[CustomerSegment] = None,
    ) -> Decimal:
        """割引後の価格を返す（小数点以下2桁）

        segment 未指定時はユーザーIDから顧客区分を推定する。
        """
        base = to_decimal(base_price)
        if base <= 0:
            return ZERO

        discounted = base
        applied: list[str] = []

        if self._registry.is_vip(user_id):
            discounted *= VIP_FACTOR
            applied.append("VIP")

        segment = segment or CustomerSegment.infer_from_user_id(user_id)
        if segment is CustomerSegment.FIRST_TIME:
            discounted *= FIRST_TIME_FACTOR
            applied.append("FIRST_TIME")

        promo_fraction = self._promo_fraction(promo_code)
        if promo_fraction is not None:
            discounted *= Decimal("1") - promo_fraction
            applied.append(f"PROMO:{promo_code}")

        if check_in is not None and check_out is not None:
            if (check_out - check_in).days >= LONG_STAY_MIN_NIGHTS:
                discounted *= LONG_STAY_FACTOR
                applied.append("LONG_STAY")

        if check_in is not None and check_in.weekday() in WEEKEND_CHECK_IN_DAYS:
            discounted *= WEEKEND_STAY_FACTOR
            applied.append("WEEKEND")

        # 割引上限は丸め後の金額でも守る
        min_price = ceil_to_cent(base * (Decimal("1") - MAX_DISCOUNT_RATE))
        if discounted < min_price:
            discounted = min_price
            applied.append("CAPPED")

        discounted = max(discounted, MINIMUM_PRICE)

        logger.debug(
            "Discount applied",
            user_id=user_id,
            base_price=str(base),
            applied=applied,
        )
        return round_half_up(discounted)

    def _promo_fraction(self, promo_code: Optional[str]) -> Optional[Decimal]:
        if not promo_code:
            return None
        promo = self._registry.find_promo_code(promo_code)
        if promo is None or not promo.is_valid_on(self._clock()):
            return None
        return promo.discount_fraction
