from __future__ import annotations

from typing import Dict, Tuple

from common.velocity_engine.errors import (
    AggregateNotFoundError,
    DuplicateTransactionError,
    EmptyTransactionIdError,
)
from common.velocity_engine.models import DailyAggregate, LoadEvent, WeekKey, WeeklyAggregate


class InMemoryVelocityStore:
    """Dict-backed `VelocityStore`.

    Single-writer: the owner serializes access, so there is no locking here.
    """

    def __init__(self) -> None:
        # id -> customer_id -> event; the same id may be used by different customers.
        self._transactions: Dict[str, Dict[str, LoadEvent]] = {}
        self._daily: Dict[Tuple[str, str], DailyAggregate] = {}
        self._weekly: Dict[Tuple[str, WeekKey], WeeklyAggregate] = {}

    def record_transaction(self, event: LoadEvent) -> None:
        if not event.id:
            raise EmptyTransactionIdError()
        by_customer = self._transactions.setdefault(event.id, {})
        if event.customer_id in by_customer:
            raise DuplicateTransactionError(event.id, event.customer_id)
        by_customer[event.customer_id] = event

    def record_daily(self, customer_id: str, day_key: str, aggregate: DailyAggregate) -> None:
        self._daily[(customer_id, day_key)] = aggregate

    def record_weekly(self, customer_id: str, week_key: WeekKey, aggregate: WeeklyAggregate) -> None:
        self._weekly[(customer_id, week_key)] = aggregate

    def fetch_daily(self, customer_id: str, day_key: str) -> DailyAggregate:
        try:
            return self._daily[(customer_id, day_key)]
        except KeyError:
            raise AggregateNotFoundError() from None

    def fetch_weekly(self, customer_id: str, week_key: WeekKey) -> WeeklyAggregate:
        try:
            return self._weekly[(customer_id, week_key)]
        except KeyError:
            raise AggregateNotFoundError() from None

    def has_transaction(self, transaction_id: str, customer_id: str) -> bool:
        return customer_id in self._transactions.get(transaction_id, {})
