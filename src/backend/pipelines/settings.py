from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from common.velocity_engine.config import VelocityLimits


load_dotenv()

_LIMIT_ENV_VARS = {
    "daily_amount_limit": "LOAD_FUNDS_DAILY_AMOUNT_LIMIT",
    "daily_count_limit": "LOAD_FUNDS_DAILY_COUNT_LIMIT",
    "weekly_amount_limit": "LOAD_FUNDS_WEEKLY_AMOUNT_LIMIT",
    "currency_marker": "LOAD_FUNDS_CURRENCY_MARKER",
}

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True)
class LoadFundsSettings:
    input_path: str = "input.txt"
    log_level: str = "warning"
    limits: VelocityLimits = field(default_factory=VelocityLimits)


def get_settings() -> LoadFundsSettings:
    """
    Load runtime settings from environment variables (and a `.env` file, if present).

    Reads:
      LOAD_FUNDS_INPUT_PATH, LOAD_FUNDS_LOG_LEVEL,
      LOAD_FUNDS_DAILY_AMOUNT_LIMIT, LOAD_FUNDS_DAILY_COUNT_LIMIT,
      LOAD_FUNDS_WEEKLY_AMOUNT_LIMIT, LOAD_FUNDS_CURRENCY_MARKER
    Unset variables keep their defaults.
    """
    input_path = os.getenv("LOAD_FUNDS_INPUT_PATH", "").strip() or "input.txt"
    log_level = os.getenv("LOAD_FUNDS_LOG_LEVEL", "").strip().lower() or "warning"
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"LOAD_FUNDS_LOG_LEVEL must be one of: {', '.join(_LOG_LEVELS)}.")

    return LoadFundsSettings(
        input_path=input_path,
        log_level=log_level,
        limits=_limits_from_env(),
    )


def _limits_from_env() -> VelocityLimits:
    raw: dict[str, Any] = {}
    for field_name, env_name in _LIMIT_ENV_VARS.items():
        value = os.getenv(env_name)
        if value is None:
            continue
        # An empty marker is meaningful (no prefix); empty limits are not.
        if field_name != "currency_marker":
            value = value.strip()
            if not value:
                continue
        raw[field_name] = value
    try:
        return VelocityLimits.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid load limit configuration: {exc}") from exc
