from decimal import Decimal

import pytest

from adapters.memory_store import InMemoryVelocityStore
from common.velocity_engine.buckets import day_key_for, week_key_for
from common.velocity_engine.engine import VelocityRuleEngine
from common.velocity_engine.models import DailyAggregate, WeeklyAggregate


@pytest.fixture
def store() -> InMemoryVelocityStore:
    return InMemoryVelocityStore()


@pytest.fixture
def engine(store) -> VelocityRuleEngine:
    return VelocityRuleEngine(store)


@pytest.fixture
def seed_daily(store):
    def _seed(*, customer_id: str, ts, total: str, count: int = 1) -> DailyAggregate:
        aggregate = DailyAggregate(total=Decimal(total), transaction_count=count)
        store.record_daily(customer_id, day_key_for(ts), aggregate)
        return aggregate

    return _seed


@pytest.fixture
def seed_weekly(store):
    def _seed(*, customer_id: str, ts, total: str) -> WeeklyAggregate:
        aggregate = WeeklyAggregate(total=Decimal(total))
        store.record_weekly(customer_id, week_key_for(ts), aggregate)
        return aggregate

    return _seed
