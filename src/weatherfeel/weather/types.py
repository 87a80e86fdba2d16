# src/weatherfeel/weather/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol, Tuple


@dataclass(frozen=True)
class GeoCoordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class UpstreamAlert:
    sender_name: str = ""
    event: str = ""
    description: str = ""


@dataclass(frozen=True)
class UpstreamWeatherSnapshot:
    """Provider response, reduced to the fields the report needs."""
    observed_at: int = 0
    feels_like_kelvin: float = 0.0
    conditions: Tuple[str, ...] = field(default_factory=tuple)
    alerts: Tuple[UpstreamAlert, ...] = field(default_factory=tuple)


class WeatherProvider(Protocol):
    async def current_conditions(self, coord: GeoCoordinate) -> UpstreamWeatherSnapshot: ...
