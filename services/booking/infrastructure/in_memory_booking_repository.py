from itertools import count
from threading import Lock
from typing import Optional

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId


class InMemoryBookingRepository(BookingRepository):
    """プロセス内の辞書を使用した BookingRepository の具象実装"""

    def __init__(self, id_prefix: str = "booking") -> None:
        self._lock = Lock()
        self._bookings: dict[BookingId, Booking] = {}
        self._sequence = count(1)
        self._id_prefix = id_prefix

    def save(self, booking: Booking) -> Booking:
        """予約を保存する（未採番なら連番で採番）"""
        with self._lock:
            if booking.id is None:
                booking_id = BookingId(f"{self._id_prefix}-{next(self._sequence)}")
                booking.assign_id(booking_id)
            self._bookings[booking.id] = booking
        return booking

    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        with self._lock:
            return self._bookings.get(booking_id)

    def find_by_room_id(self, room_id: str) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.room_id == room_id]

    def delete(self, booking_id: BookingId) -> None:
        with self._lock:
            self._bookings.pop(booking_id, None)
