from __future__ import annotations

from typing import Protocol

from .models import DailyAggregate, LoadEvent, WeekKey, WeeklyAggregate


class VelocityStore(Protocol):
    """State the engine reads and writes; holds no business logic.

    `record_daily`/`record_weekly` replace the stored aggregate: callers pass
    the complete new value, never a delta.
    """

    def record_transaction(self, event: LoadEvent) -> None:
        """Store the event keyed by (id, customer_id).

        Raises EmptyTransactionIdError or DuplicateTransactionError.
        """
        ...

    def record_daily(self, customer_id: str, day_key: str, aggregate: DailyAggregate) -> None:
        ...

    def record_weekly(self, customer_id: str, week_key: WeekKey, aggregate: WeeklyAggregate) -> None:
        ...

    def fetch_daily(self, customer_id: str, day_key: str) -> DailyAggregate:
        """Raises AggregateNotFoundError when nothing is stored for the customer/day."""
        ...

    def fetch_weekly(self, customer_id: str, week_key: WeekKey) -> WeeklyAggregate:
        """Raises AggregateNotFoundError when nothing is stored for the customer/week."""
        ...
