from abc import ABC, abstractmethod

from services.booking.domain.value_object.booking_id import BookingId


class NotificationSink(ABC):
    """予約通知の送信先（ベストエフォート）"""

    @abstractmethod
    def notify_booking_created(self, user_id: str, booking_id: BookingId) -> None:
        raise NotImplementedError
