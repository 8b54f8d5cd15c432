# Import order is evaluation order: daily amount, daily count, weekly amount.
from .vl_daily_amount_limit import VL_DAILY_AMOUNT_LIMIT
from .vl_daily_count_limit import VL_DAILY_COUNT_LIMIT
from .vl_weekly_amount_limit import VL_WEEKLY_AMOUNT_LIMIT

__all__ = [
    "VL_DAILY_AMOUNT_LIMIT",
    "VL_DAILY_COUNT_LIMIT",
    "VL_WEEKLY_AMOUNT_LIMIT",
]
