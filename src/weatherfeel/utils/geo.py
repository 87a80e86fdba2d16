# src/weatherfeel/utils/geo.py
from __future__ import annotations
import math
import re

from weatherfeel.core.errors import ValidationError
from weatherfeel.weather.types import GeoCoordinate

# signed integer or decimal; no exponent, no nan/inf
DECIMAL_RE = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")


def parse_decimal(name: str, raw: str) -> float:
    text = raw or ""
    if not DECIMAL_RE.fullmatch(text):
        raise ValidationError(f"{name} must be a decimal number, got {raw!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValidationError(f"{name} is out of the representable range")
    return value


def parse_coordinate(lat: str, lon: str) -> GeoCoordinate:
    """
    Path segments -> GeoCoordinate.
    No ±90/±180 range check here; the provider rejects impossible points.
    """
    return GeoCoordinate(latitude=parse_decimal("lat", lat), longitude=parse_decimal("lon", lon))
