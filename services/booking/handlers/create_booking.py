from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.domain.value_object import BookingRequest
from services.booking.handlers.composition_root import get_container
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import error_response, to_response
from services.shared.domain.exception import (
    AvailabilityException,
    PaymentException,
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger()


@logger.inject_lambda_context
@event_parser(model=CreateBookingRequest)
def lambda_handler(event: CreateBookingRequest, context: LambdaContext) -> dict:
    """予約作成 Lambda ハンドラ

    @event_parser デコレータで自動バリデーション後、予約作成を実行する。
    """
    logger.info("Received create booking request", room_id=event.room_id)

    service = get_container().create_booking_service
    request = BookingRequest(
        room_id=event.room_id,
        user_id=event.user_id,
        check_in=event.check_in_date,
        check_out=event.check_out_date,
        promo_code=event.promo_code,
    )

    try:
        booking = service.create(request)
        return to_response(booking)

    except ValidationException as e:
        logger.info("Invalid booking request", reason=str(e))
        return error_response("VALIDATION_ERROR", str(e))
    except AvailabilityException as e:
        return error_response("ROOM_NOT_AVAILABLE", str(e))
    except PaymentException as e:
        return error_response("PAYMENT_FAILED", str(e))
    except ResourceNotFoundException as e:
        return error_response("NOT_FOUND", str(e))
    except Exception as e:
        logger.exception("Failed to create booking")
        return error_response("INTERNAL_ERROR", str(e))
