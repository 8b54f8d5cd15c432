from __future__ import annotations

from typing import Union

from pydantic import ValidationError

from common.velocity_engine.models import Decision, LoadEvent


class LoadEventDecodeError(ValueError):
    pass


def load_event_from_line(raw: Union[str, bytes]) -> LoadEvent:
    """
    Decode one input line into a `LoadEvent`.

    Expected shape:
      {"id": "15887", "customer_id": "528", "load_amount": "$3318.47", "time": "2000-01-01T00:00:00Z"}

    Unknown keys are ignored; a missing key, a non-string id/customer_id/load_amount,
    or a timestamp without an offset is an error.
    """
    try:
        return LoadEvent.model_validate_json(raw)
    except ValidationError as exc:
        raise LoadEventDecodeError(_first_error_message(exc)) from exc


def decision_to_json(decision: Decision) -> str:
    """Compact wire form, e.g. {"id":"15887","customer_id":"528","accepted":true}."""
    return decision.model_dump_json()


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg
