from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（永続化時に採番される）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value
