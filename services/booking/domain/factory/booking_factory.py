from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object.booking_request import BookingRequest
from services.shared.domain import Money, StayPeriod


class BookingFactory:
    """予約エンティティを生成するFactory"""

    def create(self, request: BookingRequest, price: Money) -> Booking:
        """決済済みのリクエストから未採番の予約を生成する"""
        stay_period = StayPeriod(check_in=request.check_in, check_out=request.check_out)

        return Booking(
            id=None,
            room_id=request.room_id,
            user_id=request.user_id,
            stay_period=stay_period,
            price=price.rounded(),
        )
