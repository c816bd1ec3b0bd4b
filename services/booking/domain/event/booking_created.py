from dataclasses import dataclass

from services.booking.domain.value_object.booking_id import BookingId


@dataclass(frozen=True)
class BookingCreated:
    """予約が永続化され ID が確定したことを表すドメインイベント"""

    booking_id: BookingId
    room_id: str
    user_id: str
