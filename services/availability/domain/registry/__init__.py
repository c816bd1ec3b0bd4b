from .room_restriction_registry import RoomRestrictionRegistry

__all__ = ["RoomRestrictionRegistry"]
