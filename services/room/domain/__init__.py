from .entity import Room
from .enum import RoomCategory
from .repository import RoomRepository

__all__ = ["Room", "RoomCategory", "RoomRepository"]
