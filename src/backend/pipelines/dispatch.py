from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional, Union

import structlog
from pydantic import BaseModel

from adapters.load_events import LoadEventDecodeError, load_event_from_line
from common.velocity_engine.engine import VelocityRuleEngine
from common.velocity_engine.errors import EvaluationError
from common.velocity_engine.models import Decision

from .sinks import OutcomeSink

logger = structlog.get_logger(__name__)


class DispatchSummary(BaseModel):
    run_id: str
    generated_at: datetime

    accepted: int = 0
    rejected: int = 0
    errored: int = 0

    @property
    def processed(self) -> int:
        return self.accepted + self.rejected + self.errored


class LoadDispatcher:
    """Feed raw event lines through the engine strictly one at a time.

    `handle` returns only after the outcome reached the sink, so the next line
    is never decoded before the previous decision (or diagnostic) is delivered.
    """

    def __init__(self, engine: VelocityRuleEngine, sink: OutcomeSink) -> None:
        self._engine = engine
        self._sink = sink

    def handle(self, raw: Union[str, bytes]) -> Optional[Decision]:
        try:
            event = load_event_from_line(raw)
        except LoadEventDecodeError as exc:
            self._drop(f"msg: error to unmarshal fund {_as_text(raw)} error: {exc}")
            return None

        try:
            decision = self._engine.evaluate(event)
        except EvaluationError as exc:
            self._drop(str(exc))
            return None

        self._sink.publish(decision)
        return decision

    def run(self, lines: Iterable[Union[str, bytes]]) -> DispatchSummary:
        summary = DispatchSummary(run_id=str(uuid.uuid4()), generated_at=datetime.now(timezone.utc))
        for line in lines:
            raw = line.rstrip("\r\n") if isinstance(line, str) else line.rstrip(b"\r\n")
            if not raw.strip():
                continue
            decision = self.handle(raw)
            if decision is None:
                summary.errored += 1
            elif decision.accepted:
                summary.accepted += 1
            else:
                summary.rejected += 1
        return summary

    def _drop(self, message: str) -> None:
        logger.warning("load_event_dropped", diagnostic=message)
        self._sink.publish_error(message)


def _as_text(raw: Union[str, bytes]) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw
