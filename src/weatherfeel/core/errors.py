# src/weatherfeel/core/errors.py
"""
Error taxonomy and the single exception -> HTTP status mapping.

Every failure is turned into a response at the request boundary; callers only
ever see the standard reason phrase, the detail stays in the server log.
"""
from __future__ import annotations
from http import HTTPStatus
from typing import Optional

from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class WeatherFeelError(Exception):
    """Base class for all service errors."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR


class ConfigurationError(WeatherFeelError):
    """Startup configuration is missing or malformed."""


class ValidationError(WeatherFeelError):
    """Malformed or missing latitude/longitude."""

    status_code = HTTPStatus.BAD_REQUEST


class UpstreamError(WeatherFeelError):
    """The weather provider could not be reached or returned something unusable."""

    def __init__(self, message: str, *, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class InternalError(WeatherFeelError):
    """Any other failure while building the response."""


def status_for(exc: BaseException) -> int:
    if isinstance(exc, WeatherFeelError):
        return int(exc.status_code)
    if isinstance(exc, StarletteHTTPException):
        # unmatched routes and methods, e.g. an empty lat/lon segment
        return int(exc.status_code)
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)


def error_response(exc: BaseException) -> PlainTextResponse:
    code = status_for(exc)
    headers = getattr(exc, "headers", None) if isinstance(exc, StarletteHTTPException) else None
    return PlainTextResponse(HTTPStatus(code).phrase, status_code=code, headers=headers)
