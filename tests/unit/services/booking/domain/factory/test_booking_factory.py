from datetime import date
from decimal import Decimal

from services.booking.domain import BookingFactory
from services.shared.domain import Currency, Money, StayPeriod


def usd(amount: str) -> Money:
    return Money(amount=Decimal(amount), currency=Currency.usd())


class TestBookingFactory:
    def test_create_unsaved_booking(self, create_booking_request):
        factory = BookingFactory()

        booking = factory.create(create_booking_request(), usd("352.80"))

        assert booking.id is None
        assert booking.room_id == "room-101"
        assert booking.user_id == "user-1"
        assert booking.stay_period == StayPeriod(
            check_in=date(2025, 6, 9), check_out=date(2025, 6, 12)
        )
        assert booking.price == usd("352.80")

    def test_price_is_rounded_half_up(self, create_booking_request):
        booking = BookingFactory().create(create_booking_request(), usd("10.005"))

        assert booking.price.amount == Decimal("10.01")
