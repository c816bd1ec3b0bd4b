from typing import Optional

from services.booking.domain.event.booking_created import BookingCreated
from services.booking.domain.value_object.booking_id import BookingId
from services.shared.domain import AggregateRoot, Money, StayPeriod
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[Optional[BookingId]]):
    """予約エンティティ

    決済成功後に生成され、ID は永続化時に採番される。
    """

    def __init__(
        self,
        id: Optional[BookingId],
        room_id: str,
        user_id: str,
        stay_period: StayPeriod,
        price: Money,
    ) -> None:
        super().__init__(id)
        self._room_id = room_id
        self._user_id = user_id
        self._stay_period = stay_period
        self._price = price

    @property
    def room_id(self) -> str:
        return self._room_id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def price(self) -> Money:
        return self._price

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def assign_id(self, booking_id: BookingId) -> None:
        """永続化時に予約IDを採番する"""
        if self._id is not None:
            raise BusinessRuleViolationException(
                f"Booking already has an id: {self._id}"
            )
        self._id = booking_id
        self.add_domain_event(
            BookingCreated(
                booking_id=booking_id,
                room_id=self._room_id,
                user_id=self._user_id,
            )
        )
