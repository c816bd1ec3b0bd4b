from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PromoCode:
    """プロモーションコード

    expires_on はコードが有効な最終日。None の場合は無期限。
    """

    code: str
    discount_fraction: Decimal
    expires_on: Optional[date] = None

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Promo code cannot be empty")
        if not Decimal("0") <= self.discount_fraction <= Decimal("1"):
            raise ValueError(
                f"Discount fraction must be between 0 and 1: {self.discount_fraction}"
            )

    def __str__(self) -> str:
        return self.code

    def is_valid_on(self, day: date) -> bool:
        return self.expires_on is None or day <= self.expires_on
