from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator


def dates_overlap(start1: date, end1: date, start2: date, end2: date) -> bool:
    """半開区間 [start1, end1) と [start2, end2) が重なるかどうか

    端点が接しているだけ (end1 == start2) の場合は重ならない。
    """
    return start1 < end2 and start2 < end1


def iter_nights(check_in: date, check_out: date) -> Iterator[date]:
    """[check_in, check_out) の各宿泊日を順に返す"""
    current = check_in
    while current < check_out:
        yield current
        current += timedelta(days=1)


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間（チェックイン日 + チェックアウト日の半開区間）"""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise ValueError("Check-out date must be after check-in date")

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days

    def dates(self) -> Iterator[date]:
        return iter_nights(self.check_in, self.check_out)

    def overlaps(self, other: StayPeriod) -> bool:
        return dates_overlap(
            self.check_in, self.check_out, other.check_in, other.check_out
        )
