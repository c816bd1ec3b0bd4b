from decimal import Decimal

from services.booking.domain import CancellationPolicy


class TestCancellationPolicy:
    def test_refund_is_zero_in_booking_currency(self, create_booking):
        booking = create_booking(price_amount=Decimal("999.99"))

        refund = CancellationPolicy().refund_amount(booking)

        assert refund.amount == Decimal("0.00")
        assert refund.currency == booking.price.currency
