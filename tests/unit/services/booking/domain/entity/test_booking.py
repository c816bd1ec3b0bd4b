import pytest

from services.booking.domain import BookingCreated, BookingId
from services.shared.domain.exception import BusinessRuleViolationException


class TestBooking:
    def test_unsaved_booking(self, create_booking):
        booking = create_booking(booking_id=None)

        assert booking.id is None
        assert not booking.is_persisted
        assert booking.flush_domain_events() == []

    def test_assign_id_records_event(self, create_booking):
        booking = create_booking(booking_id=None)

        booking.assign_id(BookingId("booking-7"))

        assert booking.is_persisted
        assert booking.id == BookingId("booking-7")
        assert booking.flush_domain_events() == [
            BookingCreated(
                booking_id=BookingId("booking-7"),
                room_id="room-101",
                user_id="user-1",
            )
        ]
        assert booking.flush_domain_events() == []

    def test_assign_id_twice(self, create_booking):
        booking = create_booking()

        with pytest.raises(BusinessRuleViolationException):
            booking.assign_id(BookingId("booking-2"))

    def test_equality_by_id(self, create_booking):
        assert create_booking(user_id="a") == create_booking(user_id="b")
        assert create_booking(booking_id="b1") != create_booking(booking_id="b2")

    def test_unsaved_bookings_compare_by_identity(self, create_booking):
        booking = create_booking(booking_id=None)

        assert booking == booking
        assert booking != create_booking(booking_id=None)


class TestBookingId:
    def test_empty_value(self):
        with pytest.raises(ValueError, match="BookingId cannot be empty"):
            BookingId("")

    def test_str(self):
        assert str(BookingId("booking-1")) == "booking-1"
