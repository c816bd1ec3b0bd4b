from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from services.discount.domain.value_object.promo_code import PromoCode
from services.shared.utils.decimals import to_decimal
from services.shared.utils.logger import get_logger
from services.shared.utils.rw_lock import ReadWriteLock

logger = get_logger("discount")

DEFAULT_PROMO_CODES = (
    PromoCode("WELCOME10", Decimal("0.10")),
    PromoCode("SAVE20", Decimal("0.20")),
    PromoCode("SUMMER25", Decimal("0.25")),
    # 失効済みコード
    PromoCode("EXPIRED", Decimal("0.50"), expires_on=date.min),
)

DEFAULT_VIP_USERS = ("vip-user-1", "vip-user-2", "premium-customer")


class CustomerBenefitRegistry:
    """VIP ユーザーとプロモーションコードの管理

    割引計算からの参照が大半で更新はまれなため ReadWriteLock で保護する。
    """

    def __init__(
        self,
        promo_codes: Iterable[PromoCode] = (),
        vip_users: Iterable[str] = (),
    ) -> None:
        self._lock = ReadWriteLock()
        self._promo_codes = {promo.code: promo for promo in promo_codes}
        self._vip_users = set(vip_users)

    @classmethod
    def with_defaults(cls) -> CustomerBenefitRegistry:
        return cls(promo_codes=DEFAULT_PROMO_CODES, vip_users=DEFAULT_VIP_USERS)

    def is_vip(self, user_id: str) -> bool:
        with self._lock.read_lock():
            return user_id in self._vip_users

    def vip_users(self) -> frozenset[str]:
        with self._lock.read_lock():
            return frozenset(self._vip_users)

    def find_promo_code(self, code: str) -> Optional[PromoCode]:
        """コード文字列の完全一致で検索する"""
        with self._lock.read_lock():
            return self._promo_codes.get(code)

    # 管理操作

    def add_vip_user(self, user_id: str) -> None:
        with self._lock.write_lock():
            self._vip_users.add(user_id)
        logger.info("VIP user added", user_id=user_id)

    def remove_vip_user(self, user_id: str) -> None:
        with self._lock.write_lock():
            self._vip_users.discard(user_id)
        logger.info("VIP user removed", user_id=user_id)

    def add_promo_code(
        self,
        code: str,
        discount_fraction: Decimal | float | str,
        expires_on: Optional[date] = None,
    ) -> PromoCode:
        """プロモーションコードを追加する（既存コードは上書き）"""
        promo = PromoCode(
            code=code,
            discount_fraction=to_decimal(discount_fraction),
            expires_on=expires_on,
        )
        with self._lock.write_lock():
            self._promo_codes[code] = promo
        logger.info(
            "Promo code registered",
            code=code,
            discount_fraction=str(promo.discount_fraction),
            expires_on=expires_on.isoformat() if expires_on else None,
        )
        return promo
