from .enum import PaymentStatus
from .gateway import PaymentGateway
from .value_object import ChargeResult

__all__ = ["PaymentStatus", "ChargeResult", "PaymentGateway"]
