# src/weatherfeel/core/urls.py
from __future__ import annotations
from typing import Final
from urllib.parse import urlencode

# Base domain comes from Settings.openweather_base; only paths live here
OPENWEATHER_PATHS: Final[dict[str, str]] = {
    # One Call 3.0: current conditions + alerts in one response
    "onecall": "/data/3.0/onecall",
}

ONECALL_EXCLUDE: Final[str] = "minutely,hourly,daily"


def ow_url(base: str, path_key: str) -> str:
    """
    OpenWeather endpoint builder.
    ex) ow_url("https://api.openweathermap.org", "onecall")
        -> "https://api.openweathermap.org/data/3.0/onecall"
    """
    return f"{base.rstrip('/')}{OPENWEATHER_PATHS[path_key]}"


def onecall_params(lat: float, lon: float, api_key: str) -> dict[str, str]:
    return {
        "lat": f"{lat:f}",
        "lon": f"{lon:f}",
        "exclude": ONECALL_EXCLUDE,
        "cnt": "0",
        "appid": api_key,
    }


def redacted(url: str, params: dict[str, str]) -> str:
    """Loggable URL: same query, ``appid`` masked."""
    safe = {k: ("***" if k == "appid" else v) for k, v in params.items()}
    return f"{url}?{urlencode(safe, safe=',')}"
