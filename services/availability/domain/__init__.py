from .registry import RoomRestrictionRegistry
from .service import AvailabilityEngine

__all__ = ["RoomRestrictionRegistry", "AvailabilityEngine"]
