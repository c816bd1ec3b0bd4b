from __future__ import annotations

from decimal import Decimal
from threading import Lock
from typing import Iterable, Optional

from services.room.domain.entity import Room
from services.room.domain.repository import RoomRepository
from services.shared.domain import Currency, Money

# (部屋ID, 部屋タイプ, 定員, 基本料金) 料金表の既定値と同じ金額
DEFAULT_ROOMS: tuple[tuple[str, str, int, Decimal], ...] = (
    ("economy-room", "single", 1, Decimal("80.00")),
    ("standard-room", "double", 2, Decimal("120.00")),
    ("deluxe-room", "double", 2, Decimal("180.00")),
    ("suite-room", "suite", 4, Decimal("300.00")),
    ("premium-suite", "suite", 4, Decimal("450.00")),
    ("penthouse", "penthouse", 6, Decimal("800.00")),
)


class InMemoryRoomRepository(RoomRepository):
    """プロセス内の辞書を使用した RoomRepository の具象実装"""

    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self._lock = Lock()
        self._rooms: dict[str, Room] = {room.id: room for room in rooms}

    @classmethod
    def with_defaults(
        cls, currency: Optional[Currency] = None
    ) -> InMemoryRoomRepository:
        """既定の部屋カタログで初期化する"""
        currency = currency or Currency.usd()
        return cls(
            Room(
                id=room_id,
                room_type=room_type,
                capacity=capacity,
                base_price=Money(amount=price, currency=currency),
            )
            for room_id, room_type, capacity, price in DEFAULT_ROOMS
        )

    def find_by_id(self, room_id: str) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(room_id)

    def save(self, room: Room) -> None:
        with self._lock:
            self._rooms[room.id] = room
