from .entity import Booking
from .event import BookingCreated
from .factory import BookingFactory
from .port import CalendarSync, InvoiceIdGenerator, NotificationSink
from .repository import BookingRepository
from .service import BookingValidator, CancellationPolicy
from .value_object import BookingId, BookingRequest

__all__ = [
    "Booking",
    "BookingId",
    "BookingRequest",
    "BookingCreated",
    "BookingFactory",
    "BookingRepository",
    "BookingValidator",
    "CancellationPolicy",
    "NotificationSink",
    "InvoiceIdGenerator",
    "CalendarSync",
]
