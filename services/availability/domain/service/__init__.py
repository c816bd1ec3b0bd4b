from .availability_engine import AvailabilityEngine

__all__ = ["AvailabilityEngine"]
