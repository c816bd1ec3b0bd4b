import uuid
from decimal import Decimal
from typing import Optional

from services.payment.domain.gateway import PaymentGateway
from services.payment.domain.value_object import ChargeResult
from services.shared.domain import Money
from services.shared.utils.logger import get_logger

logger = get_logger("payment")


class SimulatedPaymentGateway(PaymentGateway):
    """外部決済を行わない PaymentGateway の具象実装

    approval_limit を超える金額は与信エラーとして拒否する。
    """

    def __init__(self, approval_limit: Optional[Decimal] = None) -> None:
        self._approval_limit = approval_limit

    def charge(self, user_id: str, amount: Money) -> ChargeResult:
        if self._approval_limit is not None and amount.amount > self._approval_limit:
            logger.warning(
                "Charge declined",
                user_id=user_id,
                amount=str(amount),
                approval_limit=str(self._approval_limit),
            )
            return ChargeResult.failed("Amount exceeds approval limit")

        transaction_id = f"txn_{uuid.uuid4().hex}"
        logger.info(
            "Charge completed",
            user_id=user_id,
            amount=str(amount),
            transaction_id=transaction_id,
        )
        return ChargeResult.completed(transaction_id)
