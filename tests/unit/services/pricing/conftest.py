from datetime import date
from typing import Optional
from unittest.mock import MagicMock

import pytest

from services.pricing.domain.registry.rate_table import RateTable
from services.pricing.domain.service.pricing_engine import PricingEngine

# 2025年の宿泊日に早期予約割引がかからない「今日」
AFTER_ALL_STAYS = date(2026, 1, 1)


@pytest.fixture
def rate_table() -> RateTable:
    return RateTable.with_defaults()


@pytest.fixture
def room_repository():
    """カタログ未登録（常に None）の部屋リポジトリ"""
    repository = MagicMock()
    repository.find_by_id.return_value = None
    return repository


@pytest.fixture
def create_pricing_engine(rate_table, room_repository):
    """PricingEngine を生成する Factory fixture"""

    def _factory(today: date = AFTER_ALL_STAYS, repository: Optional[object] = None):
        return PricingEngine(
            rate_table=rate_table,
            room_repository=repository or room_repository,
            clock=lambda: today,
        )

    return _factory


@pytest.fixture
def pricing_engine(create_pricing_engine) -> PricingEngine:
    return create_pricing_engine()
