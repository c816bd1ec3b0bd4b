from .customer_segment import CustomerSegment

__all__ = ["CustomerSegment"]
