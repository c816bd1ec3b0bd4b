from services.booking.domain.port import NotificationSink
from services.booking.domain.value_object import BookingId
from services.shared.utils.logger import get_logger

logger = get_logger("notification")


class LoggingNotificationSink(NotificationSink):
    """通知内容を構造化ログとして出力する NotificationSink"""

    def notify_booking_created(self, user_id: str, booking_id: BookingId) -> None:
        logger.info(
            "Booking confirmation sent", user_id=user_id, booking_id=str(booking_id)
        )
