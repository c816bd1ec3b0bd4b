from abc import ABC, abstractmethod

from services.payment.domain.value_object.charge_result import ChargeResult
from services.shared.domain import Money


class PaymentGateway(ABC):
    """決済ゲートウェイのインターフェース"""

    @abstractmethod
    def charge(self, user_id: str, amount: Money) -> ChargeResult:
        """ユーザーに課金する

        失敗は例外ではなく ChargeResult.failed で返す。
        通信障害などの想定外の失敗は例外として呼び出し元へ伝播させる。
        """
        raise NotImplementedError
