from .currency import Currency
from .money import Money
from .stay_period import StayPeriod, dates_overlap, iter_nights

__all__ = ["Currency", "Money", "StayPeriod", "dates_overlap", "iter_nights"]
