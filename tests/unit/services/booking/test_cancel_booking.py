from decimal import Decimal

import pytest

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.domain import BookingId, CancellationPolicy
from services.shared.domain import Currency, Money
from services.shared.domain.exception import ResourceNotFoundException


@pytest.fixture
def cancel_booking_service(booking_repository) -> CancelBookingService:
    return CancelBookingService(
        repository=booking_repository, cancellation_policy=CancellationPolicy()
    )


class TestCancelBookingService:
    def test_cancel_removes_booking(
        self, cancel_booking_service, booking_repository, create_booking
    ):
        booking = booking_repository.save(create_booking(booking_id=None))

        refund = cancel_booking_service.cancel(booking.id)

        assert refund == Money(amount=Decimal("0.00"), currency=Currency.usd())
        assert booking_repository.find_by_id(booking.id) is None
        assert booking_repository.find_by_room_id(booking.room_id) == []

    def test_cancel_unknown_booking(self, cancel_booking_service):
        with pytest.raises(ResourceNotFoundException, match="Booking not found: nope"):
            cancel_booking_service.cancel(BookingId("nope"))

    def test_cancel_twice(
        self, cancel_booking_service, booking_repository, create_booking
    ):
        booking = booking_repository.save(create_booking(booking_id=None))
        cancel_booking_service.cancel(booking.id)

        with pytest.raises(ResourceNotFoundException):
            cancel_booking_service.cancel(booking.id)

    def test_cancel_uses_repository(self, mock_repository, create_booking):
        booking = create_booking()
        mock_repository.find_by_id.return_value = booking
        service = CancelBookingService(
            repository=mock_repository, cancellation_policy=CancellationPolicy()
        )

        service.cancel(booking.id)

        mock_repository.find_by_id.assert_called_once_with(booking.id)
        mock_repository.delete.assert_called_once_with(booking.id)
