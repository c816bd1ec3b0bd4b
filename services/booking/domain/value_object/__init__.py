from .booking_id import BookingId
from .booking_request import BookingRequest

__all__ = ["BookingId", "BookingRequest"]
