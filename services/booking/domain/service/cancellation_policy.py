from services.booking.domain.entity.booking import Booking
from services.shared.domain import Money


class CancellationPolicy:
    """キャンセル時の返金額を決める

    返金ルールは未定義のため、現状は常に 0 を返す。
    """

    def refund_amount(self, booking: Booking) -> Money:
        return Money.zero(booking.price.currency)
