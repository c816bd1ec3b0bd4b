from dataclasses import dataclass
from decimal import Decimal

from services.shared.utils.decimals import round_half_up

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """通貨付きの金額（予約料金・返金額）

    負の金額は許可しない。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def rounded(self) -> "Money":
        """小数点以下2桁に四捨五入した金額を返す"""
        return Money(amount=round_half_up(self.amount), currency=self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(amount=Decimal("0.00"), currency=currency)
