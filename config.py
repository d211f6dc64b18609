"""Runtime settings read from the environment and an optional ``.env`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_REPORTING_CURRENCY = "756"
DEFAULT_FX_URL = "https://api.exchangerate-api.com/v4/latest/{symbol}"
DEFAULT_FX_TIMEOUT = 8.0
DEFAULT_AI_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class Settings:
    reporting_currency: str = DEFAULT_REPORTING_CURRENCY
    fx_url: str = DEFAULT_FX_URL
    fx_timeout: float = DEFAULT_FX_TIMEOUT
    household_size: int = 1
    log_level: str = "INFO"
    openai_api_key: str = ""
    ai_model: str = DEFAULT_AI_MODEL


def clamp_household_size(value) -> int:
    """Coerce a user-supplied household size to an integer >= 1."""
    try:
        size = int(value)
    except (TypeError, ValueError):
        return 1
    return max(size, 1)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %s", name, raw, default)
        return default
    return value


def load_settings(env_file: str | None = None) -> Settings:
    """Build settings from ``env_file`` (or ``./.env``) plus the process environment."""
    load_dotenv(dotenv_path=env_file, override=False)

    raw_household = os.getenv("SPENDSCOPE_HOUSEHOLD_SIZE", "1")
    household_size = clamp_household_size(raw_household)
    if str(household_size) != raw_household.strip():
        logger.warning("SPENDSCOPE_HOUSEHOLD_SIZE=%r clamped to %d", raw_household, household_size)

    return Settings(
        reporting_currency=os.getenv("SPENDSCOPE_REPORTING_CURRENCY", DEFAULT_REPORTING_CURRENCY).strip()
        or DEFAULT_REPORTING_CURRENCY,
        fx_url=os.getenv("SPENDSCOPE_FX_URL", DEFAULT_FX_URL).strip() or DEFAULT_FX_URL,
        fx_timeout=_env_float("SPENDSCOPE_FX_TIMEOUT", DEFAULT_FX_TIMEOUT),
        household_size=household_size,
        log_level=os.getenv("SPENDSCOPE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
        ai_model=os.getenv("SPENDSCOPE_AI_MODEL", DEFAULT_AI_MODEL).strip() or DEFAULT_AI_MODEL,
    )
