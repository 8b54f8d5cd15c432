from __future__ import annotations

from ..context import LoadWindow
from ..models import Bucket, RejectionReason
from ..registry import register_rule
from ..rule import VelocityRule


@register_rule
class VL_WEEKLY_AMOUNT_LIMIT(VelocityRule):
    rule_id = "VL-WEEKLY-AMOUNT-LIMIT"
    rule_title = "Accepted loads for a customer stay within the ISO-week amount limit"
    bucket = Bucket.WEEK
    reason = RejectionReason.WEEKLY_AMOUNT_LIMIT

    def evaluate(self, window: LoadWindow) -> bool:
        # First load of the week bootstraps the bucket and is not limit-checked.
        if window.weekly is None:
            return True
        return window.weekly_total_after() <= window.limits.weekly_amount_limit
