from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from services.payment.domain.enum.payment_status import PaymentStatus


@dataclass(frozen=True)
class ChargeResult:
    """決済ゲートウェイの課金結果（Value Object）"""

    status: PaymentStatus
    transaction_id: Optional[str] = None
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status == PaymentStatus.COMPLETED and not self.transaction_id:
            raise ValueError("Completed charge requires a transaction id")

    @property
    def success(self) -> bool:
        return self.status == PaymentStatus.COMPLETED

    @classmethod
    def completed(cls, transaction_id: str) -> ChargeResult:
        return cls(status=PaymentStatus.COMPLETED, transaction_id=transaction_id)

    @classmethod
    def failed(cls, reason: str) -> ChargeResult:
        return cls(status=PaymentStatus.FAILED, reason=reason)
