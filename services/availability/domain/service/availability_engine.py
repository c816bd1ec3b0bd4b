from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from services.availability.domain.registry.room_restriction_registry import (
    RoomRestrictionRegistry,
)
from services.booking.domain.repository.booking_repository import BookingRepository
from services.room.domain.enum.room_category import RoomCategory
from services.room.domain.repository.room_repository import RoomRepository
from services.shared.domain.value_object.stay_period import StayPeriod
from services.shared.utils.logger import get_logger

logger = get_logger("availability")

MIN_BOOKING_NIGHTS = 1
MAX_BOOKING_NIGHTS = 30
MAX_ADVANCE_BOOKING_DAYS = 365
WEEKEND_MIN_NIGHTS_PREMIUM_ROOMS = 2
# 土・日
WEEKEND_CHECK_IN_DAYS = frozenset({5, 6})


class AvailabilityEngine:
    """予約可否判定のドメインサービス

    以下の順に判定し、最初に失敗した時点で False を返す。

    1. 引数の妥当性（from < to、from >= 今日）
    2. メンテナンス中でないこと
    3. 期間内に予約停止日がないこと
    4. 既存予約と期間が重ならないこと（半開区間）
    5. 業務ルール（泊数、事前予約日数、プレミアム部屋の週末最低泊数）
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        restrictions: RoomRestrictionRegistry,
        room_repository: Optional[RoomRepository] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._booking_repository = booking_repository
        self._restrictions = restrictions
        self._room_repository = room_repository
        self._clock = clock

    def is_available(
        self,
        room_id: Optional[str],
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> bool:
        reason = self.find_unavailability_reason(room_id, check_in, check_out)
        if reason is not None:
            logger.debug(
                "Room unavailable",
                room_id=room_id,
                check_in=str(check_in),
                check_out=str(check_out),
                reason=reason,
            )
            return False
        return True

    def find_unavailability_reason(
        self,
        room_id: Optional[str],
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> Optional[str]:
        """予約できない理由を返す。予約可能なら None"""
        if not room_id or check_in is None or check_out is None:
            return "missing_arguments"
        if check_in >= check_out:
            return "invalid_date_range"

        today = self._clock()
        if check_in < today:
            return "check_in_in_past"
        if self._restrictions.is_under_maintenance(room_id):
            return "under_maintenance"

        stay = StayPeriod(check_in=check_in, check_out=check_out)
        if self._has_blocked_dates(room_id, stay):
            return "blocked_date"
        if self._has_overlapping_booking(room_id, stay):
            return "overlapping_booking"
        return self._business_rule_violation(room_id, stay, today)

    def get_available_dates(
        self,
        room_id: Optional[str],
        start: Optional[date],
        end: Optional[date],
    ) -> list[date]:
        """start から end まで（end を含む）の各日について1泊予約の可否を調べる"""
        if not room_id or start is None or end is None:
            return []

        available: list[date] = []
        current = start
        while current <= end:
            if self.is_available(room_id, current, current + timedelta(days=1)):
                available.append(current)
            current += timedelta(days=1)
        return available

    def check_multiple_rooms(
        self,
        room_ids: Iterable[str],
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> dict[str, bool]:
        return {
            room_id: self.is_available(room_id, check_in, check_out)
            for room_id in room_ids
        }

    def _has_blocked_dates(self, room_id: str, stay: StayPeriod) -> bool:
        blocked = self._restrictions.blocked_dates_for(room_id)
        if not blocked:
            return False
        return any(night in blocked for night in stay.dates())

    def _has_overlapping_booking(self, room_id: str, stay: StayPeriod) -> bool:
        return any(
            stay.overlaps(booking.stay_period)
            for booking in self._booking_repository.find_by_room_id(room_id)
        )

    def _business_rule_violation(
        self, room_id: str, stay: StayPeriod, today: date
    ) -> Optional[str]:
        nights = stay.nights()
        check_in = stay.check_in
        if not MIN_BOOKING_NIGHTS <= nights <= MAX_BOOKING_NIGHTS:
            return "stay_length"
        if (check_in - today).days > MAX_ADVANCE_BOOKING_DAYS:
            return "too_far_in_advance"
        if (
            check_in.weekday() in WEEKEND_CHECK_IN_DAYS
            and self._category_of(room_id).is_premium
            and nights < WEEKEND_MIN_NIGHTS_PREMIUM_ROOMS
        ):
            return "premium_weekend_minimum_stay"
        return None

    def _category_of(self, room_id: str) -> RoomCategory:
        if self._room_repository is not None:
            room = self._room_repository.find_by_id(room_id)
            if room is not None:
                return room.category
        return RoomCategory.infer_from_room_id(room_id)
