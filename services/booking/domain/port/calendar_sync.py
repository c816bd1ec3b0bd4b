from abc import ABC, abstractmethod

from services.booking.domain.value_object.booking_id import BookingId


class CalendarSync(ABC):
    """外部カレンダーへの予約反映（ベストエフォート）"""

    @abstractmethod
    def push_booking(self, booking_id: BookingId) -> None:
        raise NotImplementedError
