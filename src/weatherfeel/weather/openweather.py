# src/weatherfeel/weather/openweather.py
from __future__ import annotations
import logging
import math
from typing import Any, Dict, List, Optional

import httpx

from weatherfeel.core.errors import UpstreamError
from weatherfeel.core.urls import onecall_params, ow_url, redacted
from weatherfeel.weather.types import GeoCoordinate, UpstreamAlert, UpstreamWeatherSnapshot

logger = logging.getLogger(__name__)


class OneCallWeatherProvider:
    """
    OpenWeather One Call "current + alerts" client.

    Minutely/hourly/daily blocks are excluded, so one call returns exactly what
    the report needs. Absent fields decode to zero values; fields of the wrong
    type are an UpstreamError.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.openweathermap.org",
        timeout: float = 7.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.url = ow_url(base_url, "onecall")
        self.timeout = timeout
        self.transport = transport

    async def _get(self, coord: GeoCoordinate) -> Any:
        params = onecall_params(coord.latitude, coord.longitude, self.api_key)
        target = redacted(self.url, params)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(self.url, params=params)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("OpenWeather returned %s for %s", status, target)
            raise UpstreamError(f"provider returned HTTP {status}", status=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("OpenWeather request failed for %s: %r", target, exc)
            raise UpstreamError(f"provider request failed: {type(exc).__name__}") from exc
        except ValueError as exc:
            logger.warning("OpenWeather body is not JSON for %s", target)
            raise UpstreamError("provider body is not valid JSON") from exc

    async def current_conditions(self, coord: GeoCoordinate) -> UpstreamWeatherSnapshot:
        payload = await self._get(coord)
        return decode_onecall(payload)


def _field(obj: Dict[str, Any], key: str, kinds: tuple, default: Any) -> Any:
    value = obj.get(key)
    if value is None:
        return default
    # bool is an int subclass; it is never a valid number here
    if isinstance(value, bool) or not isinstance(value, kinds):
        raise UpstreamError(f"provider field {key!r} has unexpected type {type(value).__name__}")
    # json accepts NaN/Infinity literals; they are not valid provider data
    if isinstance(value, float) and not math.isfinite(value):
        raise UpstreamError(f"provider field {key!r} is not a finite number")
    return value


def _objects(obj: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    items = _field(obj, key, (list,), [])
    for item in items:
        if not isinstance(item, dict):
            raise UpstreamError(f"provider field {key!r} holds a non-object entry")
    return items


def decode_onecall(payload: Any) -> UpstreamWeatherSnapshot:
    if not isinstance(payload, dict):
        raise UpstreamError("provider body is not a JSON object")

    current = _field(payload, "current", (dict,), {})
    dt = _field(current, "dt", (int, float), 0)
    feels_like = _field(current, "feels_like", (int, float), 0.0)

    conditions = tuple(_field(w, "main", (str,), "") for w in _objects(current, "weather"))
    alerts = tuple(
        UpstreamAlert(
            sender_name=_field(a, "sender_name", (str,), ""),
            event=_field(a, "event", (str,), ""),
            description=_field(a, "description", (str,), ""),
        )
        for a in _objects(payload, "alerts")
    )

    return UpstreamWeatherSnapshot(
        observed_at=int(dt),
        feels_like_kelvin=float(feels_like),
        conditions=conditions,
        alerts=alerts,
    )
