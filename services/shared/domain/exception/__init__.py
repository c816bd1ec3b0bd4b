from .exceptions import (
    AvailabilityException,
    BusinessRuleViolationException,
    DomainException,
    PaymentException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "AvailabilityException",
    "PaymentException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
]
