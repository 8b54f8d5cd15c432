from __future__ import annotations

from abc import ABC, abstractmethod

from .context import LoadWindow
from .models import Bucket, RejectionReason


class VelocityRule(ABC):
    rule_id: str
    rule_title: str
    bucket: Bucket
    reason: RejectionReason

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    @abstractmethod
    def evaluate(self, window: LoadWindow) -> bool:  # pragma: no cover
        """Return True when the load stays within this rule's limit."""
        raise NotImplementedError
