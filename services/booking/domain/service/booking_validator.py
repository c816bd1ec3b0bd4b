from services.booking.domain.value_object.booking_request import BookingRequest
from services.shared.domain.exception import ValidationException


class BookingValidator:
    """予約リクエストの形式チェック（副作用の前に実行する）"""

    def validate(self, request: BookingRequest) -> None:
        if not request.room_id:
            raise ValidationException("Room id is required")
        if not request.user_id:
            raise ValidationException("User id is required")
        if request.check_in is None or request.check_out is None:
            raise ValidationException("Check-in and check-out dates are required")
        if request.check_in > request.check_out:
            raise ValidationException("Invalid dates: from after to")
        if (request.check_out - request.check_in).days <= 0:
            raise ValidationException("Stay must be at least 1 night")
