# src/weatherfeel/server.py
import logging
import time
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from weatherfeel.api import health, weather
from weatherfeel.core.errors import ValidationError, WeatherFeelError, error_response
from weatherfeel.core.settings import Settings
from weatherfeel.weather.openweather import OneCallWeatherProvider

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("weatherfeel.access")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


async def _on_http_error(request: Request, exc: StarletteHTTPException):
    logger.info("%s %s answered %s", request.method, request.url.path, exc.status_code)
    return error_response(exc)


async def _on_service_error(request: Request, exc: WeatherFeelError):
    if isinstance(exc, ValidationError):
        logger.info("rejected %s: %s", request.url.path, exc)
    else:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc, exc_info=exc)
    return error_response(exc)


def create_app(settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    app = FastAPI(title="weatherfeel", version="0.1.0")

    # ============================================================
    # Configuration and collaborators, built once per process
    # ============================================================
    app.state.weather_provider = OneCallWeatherProvider(
        settings.api_key,
        base_url=settings.openweather_base,
        timeout=settings.upstream_timeout,
        transport=transport,
    )

    # ============================================================
    # Error boundary: one mapping for categorized and unexpected failures
    # ============================================================
    app.add_exception_handler(WeatherFeelError, _on_service_error)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("unhandled error on %s %s", request.method, request.url.path)
            response = error_response(exc)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response

    # ============================================================
    # Routers
    # ============================================================
    app.include_router(weather.router, tags=["weather"])
    app.include_router(health.router)

    return app
