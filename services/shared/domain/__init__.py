from .entity import AggregateRoot, Entity
from .exception import (
    AvailabilityException,
    BusinessRuleViolationException,
    DomainException,
    PaymentException,
    ResourceNotFoundException,
    ValidationException,
)
from .repository import Repository
from .value_object import Currency, Money, StayPeriod, dates_overlap, iter_nights

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "DomainException",
    "ValidationException",
    "AvailabilityException",
    "PaymentException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "Currency",
    "Money",
    "StayPeriod",
    "dates_overlap",
    "iter_nights",
]
