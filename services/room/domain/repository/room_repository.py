from abc import abstractmethod
from typing import Optional

from services.room.domain.entity.room import Room
from services.shared.domain import Repository


class RoomRepository(Repository[Room, str]):
    """部屋カタログのインターフェース"""

    @abstractmethod
    def find_by_id(self, room_id: str) -> Optional[Room]:
        """部屋IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def save(self, room: Room) -> None:
        """部屋を登録・更新する"""
        raise NotImplementedError
