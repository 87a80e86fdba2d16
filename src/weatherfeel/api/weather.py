# src/weatherfeel/api/weather.py
import logging

from fastapi import APIRouter, Depends, Request

from weatherfeel.core.errors import InternalError
from weatherfeel.models.schemas import SimplifiedWeatherReport
from weatherfeel.utils.geo import parse_coordinate
from weatherfeel.weather.transform import build_report
from weatherfeel.weather.types import WeatherProvider

logger = logging.getLogger(__name__)

router = APIRouter()


def get_weather_provider(request: Request) -> WeatherProvider:
    return request.app.state.weather_provider


@router.get(
    "/weather/lat/{lat}/lon/{lon}",
    response_model=SimplifiedWeatherReport,
    summary="Current temperature feel, conditions and alerts for a point",
)
async def get_weather(
    lat: str,
    lon: str,
    provider: WeatherProvider = Depends(get_weather_provider),
):
    """
    - 400: lat/lon is not a signed integer or decimal
    - 500: provider unreachable / unusable, or anything unexpected
    """
    coord = parse_coordinate(lat, lon)
    logger.debug("weather lookup for %s", coord)

    snapshot = await provider.current_conditions(coord)

    try:
        return build_report(snapshot)
    except (ValueError, OverflowError, OSError) as exc:
        raise InternalError(f"could not build report from {snapshot!r}") from exc
