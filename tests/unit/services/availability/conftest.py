from unittest.mock import MagicMock

import pytest

from services.availability.domain.registry.room_restriction_registry import (
    RoomRestrictionRegistry,
)
from services.availability.domain.service.availability_engine import (
    AvailabilityEngine,
)


@pytest.fixture
def restrictions() -> RoomRestrictionRegistry:
    return RoomRestrictionRegistry.with_defaults()


@pytest.fixture
def booking_repository():
    """既存予約なしのリポジトリモック"""
    repository = MagicMock()
    repository.find_by_room_id.return_value = []
    return repository


@pytest.fixture
def availability_engine(booking_repository, restrictions, clock) -> AvailabilityEngine:
    return AvailabilityEngine(
        booking_repository=booking_repository,
        restrictions=restrictions,
        clock=clock,
    )
