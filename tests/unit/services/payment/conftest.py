from decimal import Decimal

import pytest

from services.payment.infrastructure.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)


@pytest.fixture
def create_gateway():
    """SimulatedPaymentGateway を生成する Factory fixture"""

    def _factory(approval_limit: Decimal | None = None) -> SimulatedPaymentGateway:
        return SimulatedPaymentGateway(approval_limit=approval_limit)

    return _factory
