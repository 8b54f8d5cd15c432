"""Per-customer fund-load velocity engine.

Domain logic only:
- Inputs are decoded `LoadEvent`s; state lives behind the `VelocityStore` protocol.
- No file, console or JSON handling lives here.
"""

from .config import VelocityLimits
from .engine import VelocityRuleEngine
from .errors import (
    AggregateNotFoundError,
    AmountParseError,
    DuplicateTransactionError,
    EmptyTransactionIdError,
    EvaluationError,
    VelocityStoreError,
)
from .models import (
    DailyAggregate,
    Decision,
    LoadEvent,
    RejectionReason,
    WeekKey,
    WeeklyAggregate,
)
from .store import VelocityStore

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
