from abc import ABC, abstractmethod


class InvoiceIdGenerator(ABC):
    """請求書IDの採番"""

    @abstractmethod
    def generate_invoice_id(self) -> str:
        """プロセス内で一意な請求書IDを返す"""
        raise NotImplementedError
