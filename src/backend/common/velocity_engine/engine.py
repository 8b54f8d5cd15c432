from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

import structlog

from .amounts import parse_load_amount
from .buckets import day_key_for, week_key_for
from .config import VelocityLimits
from .context import LoadWindow
from .errors import AggregateNotFoundError, AmountParseError, EvaluationError, VelocityStoreError
from .models import Bucket, DailyAggregate, Decision, LoadEvent, WeekKey, WeeklyAggregate
from .registry import registry
from .rule import VelocityRule
from .store import VelocityStore

logger = structlog.get_logger(__name__)


class VelocityRuleEngine:
    """Accept or reject fund loads against per-customer daily and weekly limits.

    The engine keeps no state of its own: every running total lives in the
    store. Evaluation order is fixed: record the transaction, run the daily
    rules, then the weekly rules, and only when all pass write both new
    aggregates. A rejection leaves the aggregates untouched; the transaction
    record itself stays, so the same id cannot be replayed for the customer.

    Callers must evaluate events one at a time: the aggregates read for an
    event have to include every earlier accepted event.
    """

    def __init__(
        self,
        store: VelocityStore,
        *,
        limits: Optional[VelocityLimits] = None,
        rules: Optional[Iterable[VelocityRule]] = None,
    ):
        self._store = store
        self._limits = limits or VelocityLimits()
        self._rules = list(rules) if rules is not None else registry.create_all()

    def evaluate(self, event: LoadEvent) -> Decision:
        """Return the decision for `event`; raise EvaluationError when no decision can be made."""
        try:
            self._store.record_transaction(event)
        except VelocityStoreError as exc:
            raise EvaluationError(f"error to add transaction with id: {event.id}", exc) from exc

        day_key = day_key_for(event.time)
        window = self._daily_window(event, day_key)
        rejected = self._first_violation(Bucket.DAY, window)
        if rejected is not None:
            return self._reject(event, rejected)

        week_key = week_key_for(event.time)
        window = replace(window, weekly=self._fetch_weekly(event.customer_id, week_key))
        rejected = self._first_violation(Bucket.WEEK, window)
        if rejected is not None:
            return self._reject(event, rejected)

        self._commit(event, day_key, week_key, window)
        logger.debug(
            "load_accepted",
            id=event.id,
            customer_id=event.customer_id,
            daily_total=str(window.daily_total_after()),
            weekly_total=str(window.weekly_total_after()),
        )
        return Decision(id=event.id, customer_id=event.customer_id, accepted=True)

    def _daily_window(self, event: LoadEvent, day_key: str) -> LoadWindow:
        context = "error to validate transaction per day"
        try:
            daily = self._store.fetch_daily(event.customer_id, day_key)
        except AggregateNotFoundError:
            daily = DailyAggregate()
        except VelocityStoreError as exc:
            raise EvaluationError(context, exc) from exc
        try:
            amount = parse_load_amount(event.load_amount, self._limits.currency_marker)
        except AmountParseError as exc:
            raise EvaluationError(context, exc) from exc
        return LoadWindow(event=event, amount=amount, limits=self._limits, daily=daily)

    def _fetch_weekly(self, customer_id: str, week_key: WeekKey) -> Optional[WeeklyAggregate]:
        try:
            return self._store.fetch_weekly(customer_id, week_key)
        except AggregateNotFoundError:
            return None
        except VelocityStoreError as exc:
            raise EvaluationError("error to validate transaction per week", exc) from exc

    def _first_violation(self, bucket: Bucket, window: LoadWindow) -> Optional[VelocityRule]:
        for rule in self._rules:
            if rule.bucket != bucket:
                continue
            if not rule.evaluate(window):
                return rule
        return None

    def _commit(self, event: LoadEvent, day_key: str, week_key: WeekKey, window: LoadWindow) -> None:
        try:
            self._store.record_daily(event.customer_id, day_key, window.next_daily())
        except VelocityStoreError as exc:
            raise EvaluationError("error to add daily transaction", exc) from exc
        try:
            self._store.record_weekly(event.customer_id, week_key, window.next_weekly())
        except VelocityStoreError as exc:
            raise EvaluationError("error to add weekly transaction", exc) from exc

    def _reject(self, event: LoadEvent, rule: VelocityRule) -> Decision:
        logger.info(
            "load_rejected",
            id=event.id,
            customer_id=event.customer_id,
            rule_id=rule.rule_id,
            rule_title=rule.rule_title,
            reason=rule.reason.value,
        )
        return Decision(id=event.id, customer_id=event.customer_id, accepted=False, reason=rule.reason)
