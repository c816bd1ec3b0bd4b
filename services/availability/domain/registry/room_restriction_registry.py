from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional

from services.shared.utils.logger import get_logger
from services.shared.utils.rw_lock import ReadWriteLock

logger = get_logger("availability")

DEFAULT_MAINTENANCE_ROOMS = ("room-maintenance-1", "room-maintenance-2")

DEFAULT_BLOCKED_DATES: Mapping[str, frozenset[date]] = {
    "room-1": frozenset({date(2025, 12, 24), date(2025, 12, 25), date(2025, 12, 31)}),
    "room-2": frozenset({date(2025, 7, 4), date(2025, 11, 28)}),
}


class RoomRestrictionRegistry:
    """メンテナンス中の部屋と部屋別の予約停止日の管理"""

    def __init__(
        self,
        maintenance_rooms: Iterable[str] = (),
        blocked_dates: Optional[Mapping[str, Iterable[date]]] = None,
    ) -> None:
        self._lock = ReadWriteLock()
        self._maintenance_rooms = set(maintenance_rooms)
        self._blocked_dates: dict[str, set[date]] = {
            room_id: set(dates) for room_id, dates in (blocked_dates or {}).items()
        }

    @classmethod
    def with_defaults(cls) -> RoomRestrictionRegistry:
        return cls(
            maintenance_rooms=DEFAULT_MAINTENANCE_ROOMS,
            blocked_dates=DEFAULT_BLOCKED_DATES,
        )

    def is_under_maintenance(self, room_id: str) -> bool:
        with self._lock.read_lock():
            return room_id in self._maintenance_rooms

    def blocked_dates_for(self, room_id: str) -> frozenset[date]:
        with self._lock.read_lock():
            return frozenset(self._blocked_dates.get(room_id, ()))

    # 管理操作

    def add_maintenance_room(self, room_id: str) -> None:
        with self._lock.write_lock():
            self._maintenance_rooms.add(room_id)
        logger.info("Room put under maintenance", room_id=room_id)

    def remove_maintenance_room(self, room_id: str) -> None:
        with self._lock.write_lock():
            self._maintenance_rooms.discard(room_id)
        logger.info("Room released from maintenance", room_id=room_id)

    def block_date(self, room_id: str, day: date) -> None:
        with self._lock.write_lock():
            self._blocked_dates.setdefault(room_id, set()).add(day)
        logger.info("Date blocked", room_id=room_id, date=day.isoformat())

    def unblock_date(self, room_id: str, day: date) -> None:
        with self._lock.write_lock():
            blocked = self._blocked_dates.get(room_id)
            if blocked is not None:
                blocked.discard(day)
        logger.info("Date unblocked", room_id=room_id, date=day.isoformat())
