from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class Bucket(str, Enum):
    DAY = "DAY"
    WEEK = "WEEK"


class RejectionReason(str, Enum):
    DAILY_AMOUNT_LIMIT = "DAILY_AMOUNT_LIMIT"
    DAILY_COUNT_LIMIT = "DAILY_COUNT_LIMIT"
    WEEKLY_AMOUNT_LIMIT = "WEEKLY_AMOUNT_LIMIT"


class LoadEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    customer_id: str
    # Raw wire value, e.g. "$3318.47"; parsed by the engine.
    load_amount: str
    time: AwareDatetime


class DailyAggregate(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: Decimal = Decimal("0")
    transaction_count: int = 0
    last_event: Optional[LoadEvent] = None


class WeeklyAggregate(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: Decimal


@dataclass(frozen=True)
class WeekKey:
    """ISO-8601 week bucket: `year` is the ISO year, which can differ from the calendar year."""

    year: int
    week: int


class Decision(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    customer_id: str
    accepted: bool
    # Kept for logs/tests only; never part of the outcome encoding.
    reason: Optional[RejectionReason] = Field(default=None, exclude=True)
