from .booking_created import BookingCreated

__all__ = ["BookingCreated"]
