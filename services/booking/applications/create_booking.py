from threading import Lock
from typing import Callable, Optional

from services.availability.domain.service import AvailabilityEngine
from services.booking.domain.entity import Booking
from services.booking.domain.event import BookingCreated
from services.booking.domain.factory import BookingFactory
from services.booking.domain.port import (
    CalendarSync,
    InvoiceIdGenerator,
    NotificationSink,
)
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingValidator
from services.booking.domain.value_object import BookingRequest
from services.discount.domain.service import DiscountEngine
from services.payment.domain.gateway import PaymentGateway
from services.pricing.domain.service import PricingEngine
from services.shared.domain import Currency, Money
from services.shared.domain.exception import (
    AvailabilityException,
    PaymentException,
)
from services.shared.utils.logger import get_logger

logger = get_logger("booking")


class CreateBookingService:
    """予約作成ユースケース

    検証 → 空室確認 → 料金計算 → 割引 → 決済 → 永続化 → 事後処理 の順に呼び出す。
    判定や計算のロジックは持たず、各ドメインサービスに委譲する。
    """

    def __init__(
        self,
        repository: BookingRepository,
        validator: BookingValidator,
        availability: AvailabilityEngine,
        pricing: PricingEngine,
        discount: DiscountEngine,
        payment_gateway: PaymentGateway,
        notification_sink: NotificationSink,
        invoice_id_generator: InvoiceIdGenerator,
        factory: Optional[BookingFactory] = None,
        calendar_sync: Optional[CalendarSync] = None,
        currency: Optional[Currency] = None,
    ) -> None:
        self._repository = repository
        self._validator = validator
        self._availability = availability
        self._pricing = pricing
        self._discount = discount
        self._payment_gateway = payment_gateway
        self._notification_sink = notification_sink
        self._invoice_id_generator = invoice_id_generator
        self._factory = factory or BookingFactory()
        self._calendar_sync = calendar_sync
        self._currency = currency or Currency.usd()
        # 空室確認から永続化までを直列化し、同じ部屋の二重予約を防ぐ
        self._reservation_lock = Lock()

    def create(self, request: BookingRequest) -> Booking:
        """予約を作成する

        Raises:
            ValidationException: リクエストの形式が不正な場合
            AvailabilityException: 指定期間に予約できない場合
            PaymentException: 決済に失敗した場合
        """
        # 1. 形式チェック（ここで失敗した場合は何も呼び出さない）
        self._validator.validate(request)

        with self._reservation_lock:
            saved = self._reserve(request)

        # 7. 事後処理（失敗しても予約は取り消さない）
        for event in saved.flush_domain_events():
            if isinstance(event, BookingCreated):
                self._run_post_booking_tasks(event)

        return saved

    def _reserve(self, request: BookingRequest) -> Booking:
        # 2. 空室確認
        if not self._availability.is_available(
            request.room_id, request.check_in, request.check_out
        ):
            raise AvailabilityException("Room not available")

        # 3. 料金計算 → 4. 割引
        base_price = self._pricing.calculate_price(
            request.room_id, request.check_in, request.check_out
        )
        final_price = self._discount.apply_discount(
            request.user_id, base_price, promo_code=request.promo_code
        )
        amount = Money(amount=final_price, currency=self._currency)

        # 5. 決済
        charge = self._payment_gateway.charge(request.user_id, amount)
        if not charge.success:
            logger.warning(
                "Payment failed",
                user_id=request.user_id,
                amount=str(amount),
                reason=charge.reason,
            )
            raise PaymentException("Payment failed")

        # 6. 永続化（ID はリポジトリが採番する）
        booking = self._factory.create(request, amount)
        saved = self._repository.save(booking)
        logger.info(
            "Booking created",
            booking_id=str(saved.id),
            room_id=saved.room_id,
            price=str(saved.price),
            transaction_id=charge.transaction_id,
        )
        return saved

    def _run_post_booking_tasks(self, event: BookingCreated) -> None:
        self._best_effort("notification", lambda: self._notify(event))
        self._best_effort("invoice", lambda: self._issue_invoice(event))
        self._best_effort("calendar", lambda: self._push_to_calendar(event))

    def _notify(self, event: BookingCreated) -> None:
        self._notification_sink.notify_booking_created(event.user_id, event.booking_id)

    def _issue_invoice(self, event: BookingCreated) -> None:
        invoice_id = self._invoice_id_generator.generate_invoice_id()
        logger.info(
            "Invoice issued", booking_id=str(event.booking_id), invoice_id=invoice_id
        )

    def _push_to_calendar(self, event: BookingCreated) -> None:
        if self._calendar_sync is not None:
            self._calendar_sync.push_booking(event.booking_id)

    @staticmethod
    def _best_effort(task: str, action: Callable[[], None]) -> None:
        try:
            action()
        except Exception:
            logger.exception("Post-booking task failed", task=task)
