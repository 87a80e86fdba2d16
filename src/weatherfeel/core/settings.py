# src/weatherfeel/core/settings.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from weatherfeel.core.errors import ConfigurationError

API_KEY_ENV = "OPENWEATHERMAP_API_KEY"


@dataclass(frozen=True)
class Settings:
    api_key: str
    host: str = "0.0.0.0"
    port: int = 8080
    openweather_base: str = "https://api.openweathermap.org"
    upstream_timeout: float = 7.0
    log_level: str = "INFO"


def _number(env: Mapping[str, str], name: str, default: str, kind):
    raw = env.get(name, default)
    try:
        return kind(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from exc


def _log_level(env: Mapping[str, str]) -> str:
    level = env.get("WEATHERFEEL_LOG_LEVEL", "INFO").strip().upper()
    # getLevelName maps known names to their number, anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Invalid value for WEATHERFEEL_LOG_LEVEL: {level!r}")
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build the process configuration once at startup.

    Reads ``.env`` (if present) into the process environment first, then the
    given mapping (defaults to ``os.environ``). A missing API key is fatal.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(f"Missing required environment variable {API_KEY_ENV}")

    return Settings(
        api_key=api_key,
        host=env.get("WEATHERFEEL_HOST", "0.0.0.0"),
        port=_number(env, "WEATHERFEEL_PORT", "8080", int),
        openweather_base=env.get("OPENWEATHER_BASE", "https://api.openweathermap.org").rstrip("/"),
        upstream_timeout=_number(env, "WEATHERFEEL_UPSTREAM_TIMEOUT", "7.0", float),
        log_level=_log_level(env),
    )
