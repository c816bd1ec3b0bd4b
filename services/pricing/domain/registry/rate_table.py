from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Mapping, Optional

from services.pricing.domain.enum.season import Season
from services.shared.utils.decimals import to_decimal
from services.shared.utils.logger import get_logger
from services.shared.utils.rw_lock import ReadWriteLock

logger = get_logger("pricing")

DEFAULT_BASE_RATE = Decimal("100.0")

DEFAULT_BASE_RATES: Mapping[str, Decimal] = {
    "economy-room": Decimal("80.0"),
    "standard-room": Decimal("120.0"),
    "deluxe-room": Decimal("180.0"),
    "suite-room": Decimal("300.0"),
    "premium-suite": Decimal("450.0"),
    "penthouse": Decimal("800.0"),
}

DEFAULT_SEASONAL_MULTIPLIERS: Mapping[Season, Decimal] = {
    Season.WINTER: Decimal("0.8"),
    Season.SPRING: Decimal("1.0"),
    Season.SUMMER: Decimal("1.4"),
    Season.AUTUMN: Decimal("1.1"),
}

DEFAULT_HOLIDAYS = frozenset(
    {
        date(2025, 1, 1),
        date(2025, 2, 14),
        date(2025, 7, 4),
        date(2025, 11, 27),
        date(2025, 12, 25),
        date(2025, 12, 31),
    }
)


class RateTable:
    """料金表（部屋別の基本料金・季節係数・祝日）

    価格計算からは読み取りのみ、管理操作からは書き込みが行われるため
    ReadWriteLock で保護する。
    """

    def __init__(
        self,
        base_rates: Optional[Mapping[str, Decimal]] = None,
        seasonal_multipliers: Optional[Mapping[Season, Decimal]] = None,
        holidays: Optional[set[date] | frozenset[date]] = None,
        default_base_rate: Decimal = DEFAULT_BASE_RATE,
    ) -> None:
        self._lock = ReadWriteLock()
        self._base_rates = {k: to_decimal(v) for k, v in (base_rates or {}).items()}
        self._seasonal_multipliers = {
            Season(k): to_decimal(v)
            for k, v in (seasonal_multipliers or DEFAULT_SEASONAL_MULTIPLIERS).items()
        }
        self._holidays = set(holidays or ())
        self._default_base_rate = to_decimal(default_base_rate)

    @classmethod
    def with_defaults(cls) -> RateTable:
        """既定の料金表で初期化する"""
        return cls(
            base_rates=DEFAULT_BASE_RATES,
            seasonal_multipliers=DEFAULT_SEASONAL_MULTIPLIERS,
            holidays=DEFAULT_HOLIDAYS,
        )

    def base_rate(self, room_id: str) -> Decimal:
        """部屋の基本料金（未登録なら既定値）"""
        with self._lock.read_lock():
            return self._base_rates.get(room_id, self._default_base_rate)

    def seasonal_multiplier(self, season: Season) -> Decimal:
        with self._lock.read_lock():
            return self._seasonal_multipliers.get(season, Decimal("1.0"))

    def is_holiday(self, day: date) -> bool:
        with self._lock.read_lock():
            return day in self._holidays

    def holidays(self) -> frozenset[date]:
        with self._lock.read_lock():
            return frozenset(self._holidays)

    # 管理操作

    def set_base_rate(self, room_id: str, rate: Decimal | float | str) -> None:
        value = to_decimal(rate)
        if value < 0:
            raise ValueError("Base rate cannot be negative")
        with self._lock.write_lock():
            self._base_rates[room_id] = value
        logger.info("Base rate updated", room_id=room_id, rate=str(value))

    def set_seasonal_multiplier(
        self, season: Season | str, multiplier: Decimal | float | str
    ) -> None:
        value = to_decimal(multiplier)
        if value < 0:
            raise ValueError("Seasonal multiplier cannot be negative")
        with self._lock.write_lock():
            self._seasonal_multipliers[Season(season)] = value
        logger.info(
            "Seasonal multiplier updated",
            season=Season(season).value,
            multiplier=str(value),
        )

    def add_holiday(self, day: date) -> None:
        with self._lock.write_lock():
            self._holidays.add(day)
        logger.info("Holiday added", date=day.isoformat())

    def remove_holiday(self, day: date) -> None:
        with self._lock.write_lock():
            self._holidays.discard(day)
        logger.info("Holiday removed", date=day.isoformat())
