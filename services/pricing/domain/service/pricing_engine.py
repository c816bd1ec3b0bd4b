from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from services.pricing.domain.enum.season import Season
from services.pricing.domain.registry.rate_table import RateTable
from services.room.domain.enum.room_category import RoomCategory
from services.room.domain.repository.room_repository import RoomRepository
from services.shared.domain.value_object.stay_period import StayPeriod
from services.shared.utils.decimals import round_half_up
from services.shared.utils.logger import get_logger

logger = get_logger("pricing")

ZERO = Decimal("0.00")

WEEKEND_PREMIUM = Decimal("1.3")
HOLIDAY_PREMIUM = Decimal("1.5")

FRIDAY_DEMAND = Decimal("1.2")
SATURDAY_DEMAND = Decimal("1.25")
MIDWEEK_DEMAND = Decimal("0.9")
PREMIUM_ROOM_DEMAND = Decimal("1.1")
NEUTRAL = Decimal("1")

# (最低泊数, 係数) 上から順に最初に一致したものだけを適用する
LONG_STAY_TIERS: tuple[tuple[int, Decimal], ...] = (
    (28, Decimal("0.8")),
    (14, Decimal("0.9")),
    (7, Decimal("0.95")),
)
# (最低事前日数, 係数)
EARLY_BOOKING_TIERS: tuple[tuple[int, Decimal], ...] = (
    (90, Decimal("0.95")),
    (30, Decimal("0.97")),
)

_FRIDAY, _SATURDAY = 4, 5
_TUESDAY, _WEDNESDAY = 1, 2


@dataclass(frozen=True)
class _RoomRate:
    """1回の計算中に使う部屋の料金情報"""

    base_rate: Decimal
    category: RoomCategory


def _tier_factor(value: int, tiers: tuple[tuple[int, Decimal], ...]) -> Decimal:
    for threshold, factor in tiers:
        if value >= threshold:
            return factor
    return NEUTRAL


class PricingEngine:
    """宿泊料金計算のドメインサービス

    1泊の料金は以下の係数を順に掛け合わせて求める（加算ではない）。

    1. 基本料金（部屋カタログ → 料金表 → 既定値 100）
    2. 週末加算（金・土曜泊）
    3. 季節係数
    4. 祝日加算
    5. 需要係数（金 > 土 > 火・水 > プレミアム部屋 の優先順で1つだけ）

    滞在全体には長期滞在割引と早期予約割引をそれぞれ1段階だけ適用する。
    """

    def __init__(
        self,
        rate_table: RateTable,
        room_repository: Optional[RoomRepository] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._rate_table = rate_table
        self._room_repository = room_repository
        self._clock = clock

    def calculate_price(
        self,
        room_id: Optional[str],
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> Decimal:
        """滞在全体の料金を計算する

        引数が不正な場合は 0 を返す。
        """
        if not self._is_valid_request(room_id, check_in, check_out):
            return ZERO

        stay = StayPeriod(check_in=check_in, check_out=check_out)
        room_rate = self._room_rate(room_id)
        total = Decimal("0")
        for night in stay.dates():
            total += self._night_price(room_rate, night)

        total *= self.long_stay_factor(stay.nights())
        total *= self.early_booking_factor(check_in)

        return round_half_up(total)

    def calculate_night_price(self, room_id: str, night: date) -> Decimal:
        """1泊分の料金（丸めなし）"""
        return self._night_price(self._room_rate(room_id), night)

    def get_price_breakdown(
        self,
        room_id: Optional[str],
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> dict[date, Decimal]:
        """宿泊日ごとの1泊料金。滞在単位の割引は含まない"""
        if not self._is_valid_request(room_id, check_in, check_out):
            return {}

        stay = StayPeriod(check_in=check_in, check_out=check_out)
        room_rate = self._room_rate(room_id)
        return {
            night: self._night_price(room_rate, night) for night in stay.dates()
        }

    def get_average_nightly_rate(
        self,
        room_id: Optional[str],
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> Decimal:
        """丸め済みの滞在料金を泊数で割った値（この商は丸めない）"""
        if check_in is None or check_out is None:
            return ZERO
        nights = (check_out - check_in).days
        if nights <= 0:
            return ZERO
        return self.calculate_price(room_id, check_in, check_out) / nights

    def long_stay_factor(self, nights: int) -> Decimal:
        return _tier_factor(nights, LONG_STAY_TIERS)

    def early_booking_factor(self, check_in: date) -> Decimal:
        days_in_advance = (check_in - self._clock()).days
        return _tier_factor(days_in_advance, EARLY_BOOKING_TIERS)

    def _night_price(self, room_rate: _RoomRate, night: date) -> Decimal:
        price = room_rate.base_rate

        if night.weekday() in (_FRIDAY, _SATURDAY):
            price *= WEEKEND_PREMIUM

        price *= self._rate_table.seasonal_multiplier(Season.of(night))

        if self._rate_table.is_holiday(night):
            price *= HOLIDAY_PREMIUM

        price *= self._demand_multiplier(room_rate.category, night)

        return price

    @staticmethod
    def _demand_multiplier(category: RoomCategory, night: date) -> Decimal:
        weekday = night.weekday()
        if weekday == _FRIDAY:
            return FRIDAY_DEMAND
        if weekday == _SATURDAY:
            return SATURDAY_DEMAND
        if weekday in (_TUESDAY, _WEDNESDAY):
            return MIDWEEK_DEMAND
        # プレミアム係数は曜日係数と重ねない
        if category.is_premium:
            return PREMIUM_ROOM_DEMAND
        return NEUTRAL

    def _room_rate(self, room_id: str) -> _RoomRate:
        room = None
        if self._room_repository is not None:
            room = self._room_repository.find_by_id(room_id)
        if room is not None:
            return _RoomRate(base_rate=room.base_price.amount, category=room.category)
        return _RoomRate(
            base_rate=self._rate_table.base_rate(room_id),
            category=RoomCategory.infer_from_room_id(room_id),
        )

    @staticmethod
    def _is_valid_request(
        room_id: Optional[str],
        check_in: Optional[date],
        check_out: Optional[date],
    ) -> bool:
        if not room_id or check_in is None or check_out is None:
            logger.debug("Rejected pricing request with missing arguments")
            return False
        return check_in < check_out
