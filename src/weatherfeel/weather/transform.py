# src/weatherfeel/weather/transform.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import List

from weatherfeel.models.schemas import Alert, SimplifiedWeatherReport, TemperatureFeel
from weatherfeel.weather.types import UpstreamWeatherSnapshot

# Opinionated boundaries of the feel classification (≈ 4 °C and ≈ 24 °C).
# They belong to classify_temperature_feel only, not to the service config.
COLD_BELOW_K = 277.0
HOT_ABOVE_K = 297.0


def classify_temperature_feel(kelvin: float) -> TemperatureFeel:
    """Both boundaries are inclusive of ``moderate``."""
    if kelvin < COLD_BELOW_K:
        return TemperatureFeel.COLD
    if kelvin <= HOT_ABOVE_K:
        return TemperatureFeel.MODERATE
    return TemperatureFeel.HOT


def extract_conditions(snapshot: UpstreamWeatherSnapshot) -> List[str]:
    return list(snapshot.conditions)


def extract_alerts(snapshot: UpstreamWeatherSnapshot) -> List[Alert]:
    return [
        Alert(sender_name=a.sender_name, event=a.event, description=a.description)
        for a in snapshot.alerts
    ]


def format_timestamp(epoch_seconds: int) -> str:
    """Epoch seconds -> RFC 3339 in UTC, e.g. ``2023-05-13T17:46:40Z``."""
    observed = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return observed.isoformat().replace("+00:00", "Z")


def build_report(snapshot: UpstreamWeatherSnapshot) -> SimplifiedWeatherReport:
    return SimplifiedWeatherReport(
        timestamp=format_timestamp(snapshot.observed_at),
        current_temperature_feel=classify_temperature_feel(snapshot.feels_like_kelvin),
        current_conditions=extract_conditions(snapshot),
        alerts=extract_alerts(snapshot),
    )
