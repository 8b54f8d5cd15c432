from __future__ import annotations

from typing import Optional, Protocol, TextIO

from adapters.load_events import decision_to_json
from common.velocity_engine.models import Decision


class OutcomeSink(Protocol):
    def publish(self, decision: Decision) -> None:
        """Deliver one decision downstream."""
        ...

    def publish_error(self, message: str) -> None:
        """Deliver one diagnostic ("msg: <context> error: <cause>")."""
        ...


class StreamOutcomeSink:
    """Write decisions as JSON lines; diagnostics are written to `err` only when given."""

    def __init__(self, out: TextIO, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err

    def publish(self, decision: Decision) -> None:
        self._out.write(decision_to_json(decision) + "\n")
        self._out.flush()

    def publish_error(self, message: str) -> None:
        if self._err is None:
            return
        self._err.write(message + "\n")
        self._err.flush()
