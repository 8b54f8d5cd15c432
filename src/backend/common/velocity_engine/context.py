from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from .config import VelocityLimits
from .models import DailyAggregate, LoadEvent, WeeklyAggregate


@dataclass(frozen=True)
class LoadWindow:
    event: LoadEvent
    amount: Decimal
    limits: VelocityLimits = field(default_factory=VelocityLimits)
    daily: DailyAggregate = field(default_factory=DailyAggregate)
    # None until the weekly bucket is looked up, or when the week has no accepted load yet.
    weekly: Optional[WeeklyAggregate] = None

    def daily_total_after(self) -> Decimal:
        return self.daily.total + self.amount

    def daily_count_after(self) -> int:
        return self.daily.transaction_count + 1

    def weekly_total_after(self) -> Decimal:
        if self.weekly is None:
            return self.amount
        return self.weekly.total + self.amount

    def next_daily(self) -> DailyAggregate:
        return DailyAggregate(
            total=self.daily_total_after(),
            transaction_count=self.daily_count_after(),
            last_event=self.event,
        )

    def next_weekly(self) -> WeeklyAggregate:
        return WeeklyAggregate(total=self.weekly_total_after())
