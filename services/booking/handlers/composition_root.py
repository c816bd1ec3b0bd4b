import os
from dataclasses import dataclass
from datetime import date
from typing import Callable, Mapping, Optional

from services.availability.domain.registry import RoomRestrictionRegistry
from services.availability.domain.service import AvailabilityEngine
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.factory import BookingFactory
from services.booking.domain.service import BookingValidator, CancellationPolicy
from services.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)
from services.booking.infrastructure.logging_calendar_sync import LoggingCalendarSync
from services.booking.infrastructure.logging_notification_sink import (
    LoggingNotificationSink,
)
from services.booking.infrastructure.uuid_invoice_id_generator import (
    UuidInvoiceIdGenerator,
)
from services.discount.domain.registry import CustomerBenefitRegistry
from services.discount.domain.service import DiscountEngine
from services.payment.infrastructure.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)
from services.pricing.domain.registry import RateTable
from services.pricing.domain.service import PricingEngine
from services.room.applications.get_room import GetRoomService
from services.room.infrastructure.in_memory_room_repository import (
    InMemoryRoomRepository,
)
from services.shared.domain import Currency
from services.shared.utils.decimals import to_decimal

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BookingContainer:
    """依存関係の組み立て結果

    管理用の状態（料金表・VIP/プロモ・メンテナンス/予約停止日）はここで1つだけ生成し、
    各エンジンへ参照で渡す。
    """

    rate_table: RateTable
    benefit_registry: CustomerBenefitRegistry
    restriction_registry: RoomRestrictionRegistry
    room_repository: InMemoryRoomRepository
    booking_repository: InMemoryBookingRepository
    pricing_engine: PricingEngine
    discount_engine: DiscountEngine
    availability_engine: AvailabilityEngine
    get_room_service: GetRoomService
    create_booking_service: CreateBookingService
    cancel_booking_service: CancelBookingService


def build_container(
    clock: Callable[[], date] = date.today,
    environ: Optional[Mapping[str, str]] = None,
) -> BookingContainer:
    """環境変数を読み込み、ユースケースと依存関係を組み立てる

    環境変数:
        CURRENCY_CODE: 料金の通貨（既定 USD）
        SEED_REFERENCE_DATA: 既定の料金表・部屋カタログ・VIP・プロモ・停止日を投入するか
            （既定 true）
        PAYMENT_APPROVAL_LIMIT: この金額を超える決済を拒否する（未設定なら無制限）
    """
    env = os.environ if environ is None else environ

    currency = Currency.from_code(env.get("CURRENCY_CODE"))
    seed = env.get("SEED_REFERENCE_DATA", "true").strip().lower() in _TRUTHY
    approval_limit = env.get("PAYMENT_APPROVAL_LIMIT")

    if seed:
        rate_table = RateTable.with_defaults()
        benefit_registry = CustomerBenefitRegistry.with_defaults()
        restriction_registry = RoomRestrictionRegistry.with_defaults()
        room_repository = InMemoryRoomRepository.with_defaults(currency)
    else:
        rate_table = RateTable()
        benefit_registry = CustomerBenefitRegistry()
        restriction_registry = RoomRestrictionRegistry()
        room_repository = InMemoryRoomRepository()

    booking_repository = InMemoryBookingRepository()

    pricing_engine = PricingEngine(
        rate_table=rate_table, room_repository=room_repository, clock=clock
    )
    discount_engine = DiscountEngine(registry=benefit_registry, clock=clock)
    availability_engine = AvailabilityEngine(
        booking_repository=booking_repository,
        restrictions=restriction_registry,
        room_repository=room_repository,
        clock=clock,
    )

    create_booking_service = CreateBookingService(
        repository=booking_repository,
        validator=BookingValidator(),
        availability=availability_engine,
        pricing=pricing_engine,
        discount=discount_engine,
        payment_gateway=SimulatedPaymentGateway(
            approval_limit=to_decimal(approval_limit) if approval_limit else None
        ),
        notification_sink=LoggingNotificationSink(),
        invoice_id_generator=UuidInvoiceIdGenerator(),
        factory=BookingFactory(),
        calendar_sync=LoggingCalendarSync(),
        currency=currency,
    )
    cancel_booking_service = CancelBookingService(
        repository=booking_repository,
        cancellation_policy=CancellationPolicy(),
    )

    return BookingContainer(
        rate_table=rate_table,
        benefit_registry=benefit_registry,
        restriction_registry=restriction_registry,
        room_repository=room_repository,
        booking_repository=booking_repository,
        pricing_engine=pricing_engine,
        discount_engine=discount_engine,
        availability_engine=availability_engine,
        get_room_service=GetRoomService(repository=room_repository),
        create_booking_service=create_booking_service,
        cancel_booking_service=cancel_booking_service,
    )


_container: Optional[BookingContainer] = None


def get_container() -> BookingContainer:
    """プロセス内で共有するコンテナを返す（初回呼び出し時に生成）"""
    global _container
    if _container is None:
        _container = build_container()
    return _container
