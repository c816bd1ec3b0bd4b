from datetime import date
from decimal import Decimal
from typing import Optional
from unittest.mock import MagicMock

import pytest

from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object.booking_id import BookingId
from services.room.domain.entity.room import Room
from services.room.domain.enum.room_category import RoomCategory
from services.shared.domain import Currency, Money, StayPeriod


@pytest.fixture
def today() -> date:
    """全テスト共通の「今日」（月曜日）"""
    return date(2025, 6, 2)


@pytest.fixture
def clock(today):
    """固定日付を返す clock フィクスチャ"""
    return lambda: today


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: Optional[str] = "booking-1",
        room_id: str = "room-101",
        user_id: str = "user-1",
        check_in: date = date(2025, 6, 9),
        check_out: date = date(2025, 6, 12),
        price_amount: Decimal = Decimal("300.00"),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id) if booking_id else None,
            room_id=room_id,
            user_id=user_id,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            price=Money(amount=price_amount, currency=Currency.usd()),
        )

    return _factory


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture"""

    def _factory(
        room_id: str = "room-101",
        room_type: str = "double",
        capacity: int = 2,
        base_price: Decimal = Decimal("150.00"),
        category: Optional[RoomCategory] = None,
    ) -> Room:
        return Room(
            id=room_id,
            room_type=room_type,
            capacity=capacity,
            base_price=Money(amount=base_price, currency=Currency.usd()),
            category=category,
        )

    return _factory
