from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル

    日付の前後関係は BookingValidator で検証する（ValidationException に統一するため）。
    """

    room_id: str = Field(..., min_length=1, max_length=64, description="部屋ID")
    user_id: str = Field(..., min_length=1, max_length=64, description="ユーザーID")
    check_in_date: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2025-04-14"],
    )
    check_out_date: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2025-04-17"],
    )
    promo_code: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=32,
        description="プロモーションコード",
    )


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    booking_id: str = Field(..., min_length=1)
