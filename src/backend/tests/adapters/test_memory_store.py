from datetime import datetime, timezone
from decimal import Decimal

import pytest

from adapters.memory_store import InMemoryVelocityStore
from common.velocity_engine.errors import (
    AggregateNotFoundError,
    DuplicateTransactionError,
    EmptyTransactionIdError,
)
from common.velocity_engine.models import DailyAggregate, LoadEvent, WeekKey, WeeklyAggregate


def _event(id: str = "1", customer_id: str = "c1") -> LoadEvent:
    return LoadEvent(
        id=id,
        customer_id=customer_id,
        load_amount="$1.00",
        time=datetime(2000, 1, 1, tzinfo=timezone.utc),
    )


def test_record_transaction_rejects_empty_id():
    store = InMemoryVelocityStore()
    with pytest.raises(EmptyTransactionIdError, match="transaction must have ID"):
        store.record_transaction(_event(id=""))


def test_record_transaction_rejects_same_id_for_same_customer():
    store = InMemoryVelocityStore()
    store.record_transaction(_event())
    with pytest.raises(DuplicateTransactionError, match="transaction ID already exist") as excinfo:
        store.record_transaction(_event())
    assert excinfo.value.transaction_id == "1"
    assert excinfo.value.customer_id == "c1"


def test_record_transaction_allows_same_id_for_other_customer():
    store = InMemoryVelocityStore()
    store.record_transaction(_event(customer_id="c1"))
    store.record_transaction(_event(customer_id="c2"))
    assert store.has_transaction("1", "c1")
    assert store.has_transaction("1", "c2")
    assert not store.has_transaction("2", "c1")


def test_fetch_missing_aggregates_raises_not_found():
    store = InMemoryVelocityStore()
    store.record_daily("c1", "2000-01-01", DailyAggregate(total=Decimal("1"), transaction_count=1))
    with pytest.raises(AggregateNotFoundError):
        store.fetch_daily("c2", "2000-01-01")
    with pytest.raises(AggregateNotFoundError):
        store.fetch_daily("c1", "2000-02-01")
    with pytest.raises(AggregateNotFoundError):
        store.fetch_weekly("c1", WeekKey(year=1999, week=52))


def test_record_daily_overwrites_instead_of_merging():
    store = InMemoryVelocityStore()
    store.record_daily("c1", "2000-01-01", DailyAggregate(total=Decimal("100"), transaction_count=1))
    store.record_daily("c1", "2000-01-01", DailyAggregate(total=Decimal("30"), transaction_count=2))
    daily = store.fetch_daily("c1", "2000-01-01")
    assert daily.total == Decimal("30")
    assert daily.transaction_count == 2


def test_record_weekly_overwrites_instead_of_merging():
    store = InMemoryVelocityStore()
    week = WeekKey(year=1999, week=52)
    store.record_weekly("c1", week, WeeklyAggregate(total=Decimal("100")))
    store.record_weekly("c1", week, WeeklyAggregate(total=Decimal("5")))
    assert store.fetch_weekly("c1", week).total == Decimal("5")


def test_buckets_for_one_customer_are_kept_side_by_side():
    store = InMemoryVelocityStore()
    store.record_daily("c1", "2000-01-01", DailyAggregate(total=Decimal("1"), transaction_count=1))
    store.record_daily("c1", "2000-02-01", DailyAggregate(total=Decimal("2"), transaction_count=1))
    store.record_weekly("c1", WeekKey(year=1999, week=52), WeeklyAggregate(total=Decimal("1")))
    store.record_weekly("c1", WeekKey(year=2000, week=1), WeeklyAggregate(total=Decimal("2")))

    assert store.fetch_daily("c1", "2000-01-01").total == Decimal("1")
    assert store.fetch_daily("c1", "2000-02-01").total == Decimal("2")
    assert store.fetch_weekly("c1", WeekKey(year=1999, week=52)).total == Decimal("1")
    assert store.fetch_weekly("c1", WeekKey(year=2000, week=1)).total == Decimal("2")
