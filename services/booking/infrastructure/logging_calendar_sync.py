from services.booking.domain.port import CalendarSync
from services.booking.domain.value_object import BookingId
from services.shared.utils.logger import get_logger

logger = get_logger("notification")


class LoggingCalendarSync(CalendarSync):
    """外部カレンダー連携の代わりにログを出力する CalendarSync"""

    def push_booking(self, booking_id: BookingId) -> None:
        logger.info("Booking pushed to external calendar", booking_id=str(booking_id))
