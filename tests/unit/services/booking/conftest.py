from datetime import date
from decimal import Decimal
from typing import Optional
from unittest.mock import MagicMock

import pytest

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain import BookingRequest, BookingValidator
from services.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)
from services.payment.domain import ChargeResult


@pytest.fixture
def create_booking_request():
    """BookingRequest を生成する Factory fixture"""

    def _factory(
        room_id: str = "room-101",
        user_id: str = "user-1",
        check_in: Optional[date] = date(2025, 6, 9),
        check_out: Optional[date] = date(2025, 6, 12),
        promo_code: Optional[str] = None,
    ) -> BookingRequest:
        return BookingRequest(
            room_id=room_id,
            user_id=user_id,
            check_in=check_in,
            check_out=check_out,
            promo_code=promo_code,
        )

    return _factory


@pytest.fixture
def booking_repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def availability():
    engine = MagicMock()
    engine.is_available.return_value = True
    return engine


@pytest.fixture
def pricing():
    engine = MagicMock()
    engine.calculate_price.return_value = Decimal("392.00")
    return engine


@pytest.fixture
def discount():
    engine = MagicMock()
    engine.apply_discount.return_value = Decimal("352.80")
    return engine


@pytest.fixture
def payment_gateway():
    gateway = MagicMock()
    gateway.charge.return_value = ChargeResult.completed("txn_test")
    return gateway


@pytest.fixture
def notification_sink():
    return MagicMock()


@pytest.fixture
def invoice_id_generator():
    generator = MagicMock()
    generator.generate_invoice_id.return_value = "INV-test"
    return generator


@pytest.fixture
def calendar_sync():
    return MagicMock()


@pytest.fixture
def create_booking_service(
    booking_repository,
    availability,
    pricing,
    discount,
    payment_gateway,
    notification_sink,
    invoice_id_generator,
    calendar_sync,
) -> CreateBookingService:
    return CreateBookingService(
        repository=booking_repository,
        validator=BookingValidator(),
        availability=availability,
        pricing=pricing,
        discount=discount,
        payment_gateway=payment_gateway,
        notification_sink=notification_sink,
        invoice_id_generator=invoice_id_generator,
        calendar_sync=calendar_sync,
    )
