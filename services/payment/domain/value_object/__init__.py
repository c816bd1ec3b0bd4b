from .charge_result import ChargeResult

__all__ = ["ChargeResult"]
