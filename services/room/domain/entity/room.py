from typing import Optional

from services.room.domain.enum.room_category import RoomCategory
from services.shared.domain import Entity, Money


class Room(Entity[str]):
    """部屋（カタログ管理の参照データ、不変）"""

    def __init__(
        self,
        id: str,
        room_type: str,
        capacity: int,
        base_price: Money,
        category: Optional[RoomCategory] = None,
    ) -> None:
        if not id:
            raise ValueError("Room id cannot be empty")
        if capacity < 1:
            raise ValueError("Room capacity must be at least 1")
        super().__init__(id)
        self._room_type = room_type
        self._capacity = capacity
        self._base_price = base_price
        # カテゴリは生成時に確定させる。未指定なら部屋IDから推定
        self._category = category or RoomCategory.infer_from_room_id(id)

    @property
    def room_type(self) -> str:
        return self._room_type

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def base_price(self) -> Money:
        return self._base_price

    @property
    def category(self) -> RoomCategory:
        return self._category
