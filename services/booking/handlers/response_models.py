from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId
from services.shared.domain import Money


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    room_id: str
    user_id: str
    check_in_date: str
    check_out_date: str
    nights: int
    price_amount: str
    price_currency: str


class CancellationData(BaseModel):
    """キャンセル結果のレスポンスモデル"""

    booking_id: str
    refund_amount: str
    refund_currency: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData | CancellationData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BookingData(
            booking_id=str(booking.id),
            room_id=booking.room_id,
            user_id=booking.user_id,
            check_in_date=booking.stay_period.check_in.isoformat(),
            check_out_date=booking.stay_period.check_out.isoformat(),
            nights=booking.stay_period.nights(),
            price_amount=str(booking.price.amount),
            price_currency=str(booking.price.currency),
        )
    ).model_dump()


def to_cancellation_response(booking_id: BookingId, refund: Money) -> dict:
    """キャンセル結果をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=CancellationData(
            booking_id=str(booking_id),
            refund_amount=str(refund.amount),
            refund_currency=str(refund.currency),
        )
    ).model_dump()


def error_response(error_code: str, message: str, details: list | None = None) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
