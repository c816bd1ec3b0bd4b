from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.parser import event_parser
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.domain.value_object import BookingId
from services.booking.handlers.composition_root import get_container
from services.booking.handlers.request_models import CancelBookingRequest
from services.booking.handlers.response_models import (
    error_response,
    to_cancellation_response,
)
from services.shared.domain.exception import ResourceNotFoundException

logger = Logger()


@logger.inject_lambda_context
@event_parser(model=CancelBookingRequest)
def lambda_handler(event: CancelBookingRequest, context: LambdaContext) -> dict:
    """予約キャンセル Lambda ハンドラ"""
    logger.info("Received cancel booking request", booking_id=event.booking_id)

    service = get_container().cancel_booking_service
    booking_id = BookingId(value=event.booking_id)

    try:
        refund = service.cancel(booking_id)
        return to_cancellation_response(booking_id, refund)

    except ResourceNotFoundException as e:
        return error_response("NOT_FOUND", str(e))
    except Exception as e:
        logger.exception("Failed to cancel booking")
        return error_response("INTERNAL_ERROR", str(e))
