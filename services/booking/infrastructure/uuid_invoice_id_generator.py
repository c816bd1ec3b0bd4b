import uuid

from services.booking.domain.port import InvoiceIdGenerator


class UuidInvoiceIdGenerator(InvoiceIdGenerator):
    """UUID4 による請求書ID採番"""

    def __init__(self, prefix: str = "INV") -> None:
        self._prefix = prefix

    def generate_invoice_id(self) -> str:
        return f"{self._prefix}-{uuid.uuid4().hex}"
