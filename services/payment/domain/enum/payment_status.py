from enum import Enum


class PaymentStatus(str, Enum):
    """決済ステータス"""

    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
