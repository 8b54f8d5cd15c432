"""JSON line codec for load events and decisions (no I/O)."""

from .codec import LoadEventDecodeError, decision_to_json, load_event_from_line

__all__ = [
    "LoadEventDecodeError",
    "decision_to_json",
    "load_event_from_line",
]
