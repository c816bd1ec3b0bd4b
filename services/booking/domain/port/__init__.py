from .calendar_sync import CalendarSync
from .invoice_id_generator import InvoiceIdGenerator
from .notification_sink import NotificationSink

__all__ = ["NotificationSink", "InvoiceIdGenerator", "CalendarSync"]
