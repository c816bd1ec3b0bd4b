from services.room.domain.entity import Room
from services.room.domain.repository import RoomRepository
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils.logger import get_logger

logger = get_logger("room")


class GetRoomService:
    """部屋参照ユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def get_room(self, room_id: str) -> Room:
        """部屋を取得する

        Raises:
            ResourceNotFoundException: カタログに存在しない部屋IDの場合
        """
        room = self._repository.find_by_id(room_id)
        if room is None:
            logger.info("Room not found", room_id=room_id)
            raise ResourceNotFoundException(f"Room not found: {room_id}")
        return room
