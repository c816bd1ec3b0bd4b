from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class BookingRequest:
    """予約リクエスト（API 呼び出しごとに生成される入力値）

    宿泊期間は [check_in, check_out) の半開区間。
    形式の検証は BookingValidator が行う。
    """

    room_id: str
    user_id: str
    check_in: date
    check_out: date
    promo_code: Optional[str] = None
