from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .errors import AmountParseError


def parse_load_amount(raw: str, currency_marker: str = "$") -> Decimal:
    """Parse a wire amount such as "$3318.47" (the marker is optional).

    Whitespace anywhere in the value is malformed, including around the marker.
    """
    text = raw or ""
    if currency_marker and text.startswith(currency_marker):
        text = text[len(currency_marker):]
    if not text:
        raise AmountParseError(f"invalid load amount {raw!r}: empty value")
    # Decimal() itself tolerates surrounding whitespace.
    if text != text.strip():
        raise AmountParseError(f"invalid load amount {raw!r}: unexpected whitespace")
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise AmountParseError(f"invalid load amount {raw!r}") from exc
    if not value.is_finite():
        raise AmountParseError(f"invalid load amount {raw!r}: not a finite number")
    return value
