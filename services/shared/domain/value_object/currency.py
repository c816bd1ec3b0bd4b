from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_CURRENCY_CODE = "USD"


@dataclass(frozen=True)
class Currency:
    """料金の通貨コード（ISO 4217 の英字3文字）

    予約料金は単一通貨で扱い、既定は米ドル。
    """

    code: str

    def __post_init__(self) -> None:
        if len(self.code) != 3 or not self.code.isalpha():
            raise ValueError(f"Invalid currency code: {self.code}")
        object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.code

    @classmethod
    def usd(cls) -> Currency:
        return cls(DEFAULT_CURRENCY_CODE)

    @classmethod
    def from_code(cls, code: Optional[str]) -> Currency:
        """設定値から通貨を生成する（未設定・空文字なら既定通貨）"""
        if code is None or not code.strip():
            return cls.usd()
        return cls(code.strip())
