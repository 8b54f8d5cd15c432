from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class VelocityLimits(BaseModel):
    """Per-customer load velocity limits.

    Amount limits are inclusive: a running total equal to the limit is allowed.
    """

    model_config = ConfigDict(frozen=True)

    daily_amount_limit: Decimal = Field(default=Decimal("5000"), gt=0)
    daily_count_limit: int = Field(default=3, gt=0)
    weekly_amount_limit: Decimal = Field(default=Decimal("20000"), gt=0)
    # Optional prefix stripped from `load_amount` before parsing.
    currency_marker: str = "$"
