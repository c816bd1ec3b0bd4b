from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import CancellationPolicy
from services.booking.domain.value_object import BookingId
from services.shared.domain import Money
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils.logger import get_logger

logger = get_logger("booking")


class CancelBookingService:
    """予約キャンセルユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        cancellation_policy: CancellationPolicy,
    ) -> None:
        self._repository = repository
        self._cancellation_policy = cancellation_policy

    def cancel(self, booking_id: BookingId) -> Money:
        """予約を削除し、返金額を返す

        Raises:
            ResourceNotFoundException: 予約が存在しない場合
        """
        # 1. 予約を取得
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        # 2. 返金額を決定
        refund = self._cancellation_policy.refund_amount(booking)

        # 3. 削除
        self._repository.delete(booking_id)
        logger.info(
            "Booking cancelled",
            booking_id=str(booking_id),
            room_id=booking.room_id,
            refund=str(refund),
        )
        return refund
