from .rate_table import DEFAULT_BASE_RATE, RateTable

__all__ = ["RateTable", "DEFAULT_BASE_RATE"]
