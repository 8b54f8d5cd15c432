from __future__ import annotations

from ..context import LoadWindow
from ..models import Bucket, RejectionReason
from ..registry import register_rule
from ..rule import VelocityRule


@register_rule
class VL_DAILY_COUNT_LIMIT(VelocityRule):
    rule_id = "VL-DAILY-COUNT-LIMIT"
    rule_title = "A customer has at most the configured number of accepted loads per day"
    bucket = Bucket.DAY
    reason = RejectionReason.DAILY_COUNT_LIMIT

    def evaluate(self, window: LoadWindow) -> bool:
        return window.daily_count_after() <= window.limits.daily_count_limit
