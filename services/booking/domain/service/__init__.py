from .booking_validator import BookingValidator
from .cancellation_policy import CancellationPolicy

__all__ = ["BookingValidator", "CancellationPolicy"]
