from __future__ import annotations

from ..context import LoadWindow
from ..models import Bucket, RejectionReason
from ..registry import register_rule
from ..rule import VelocityRule


@register_rule
class VL_DAILY_AMOUNT_LIMIT(VelocityRule):
    rule_id = "VL-DAILY-AMOUNT-LIMIT"
    rule_title = "Accepted loads for a customer stay within the daily amount limit"
    bucket = Bucket.DAY
    reason = RejectionReason.DAILY_AMOUNT_LIMIT

    def evaluate(self, window: LoadWindow) -> bool:
        return window.daily_total_after() <= window.limits.daily_amount_limit
