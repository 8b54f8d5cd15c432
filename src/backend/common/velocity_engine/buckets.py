from __future__ import annotations

from datetime import datetime

from .models import WeekKey

# Year, day of month, month: one key per calendar day in the event's own offset.
DAY_KEY_FORMAT = "%Y-%d-%m"


def day_key_for(ts: datetime) -> str:
    return ts.strftime(DAY_KEY_FORMAT)


def week_key_for(ts: datetime) -> WeekKey:
    iso = ts.isocalendar()
    return WeekKey(year=iso[0], week=iso[1])
