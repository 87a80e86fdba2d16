from __future__ import annotations

import asyncio

import httpx
import pytest

from test_data import dummy_onecall_advisory, dummy_onecall_sparse
from weatherfeel.core.errors import UpstreamError
from weatherfeel.weather.openweather import OneCallWeatherProvider, decode_onecall
from weatherfeel.weather.types import GeoCoordinate, UpstreamAlert, UpstreamWeatherSnapshot


def fetch(upstream, coord=GeoCoordinate(40.7, -74.0)):
    provider = OneCallWeatherProvider("test-key", base_url="https://ow.test", transport=upstream.transport)
    return asyncio.run(provider.current_conditions(coord))


def test_request_asks_for_current_and_alerts_only(upstream):
    fetch(upstream)

    (request,) = upstream.requests
    assert request.method == "GET"
    assert request.url.host == "ow.test"
    assert request.url.path == "/data/3.0/onecall"
    params = request.url.params
    assert params["lat"] == "40.700000"
    assert params["lon"] == "-74.000000"
    assert params["exclude"] == "minutely,hourly,daily"
    assert params["cnt"] == "0"
    assert params["appid"] == "test-key"


def test_decodes_conditions_and_alerts_in_order(upstream):
    upstream.handler = lambda request: httpx.Response(200, json=dummy_onecall_advisory)

    snapshot = fetch(upstream)

    assert snapshot.observed_at == 1690000000
    assert snapshot.feels_like_kelvin == pytest.approx(290.15)
    assert snapshot.conditions == ("Rain", "Mist")
    assert snapshot.alerts == (
        UpstreamAlert(
            sender_name="NWS Upton NY",
            event="Heat Advisory",
            description="...HEAT ADVISORY REMAINS IN EFFECT UNTIL 8 PM EDT...",
        ),
    )


def test_absent_fields_default_to_zero_values():
    assert decode_onecall({}) == UpstreamWeatherSnapshot()

    snapshot = decode_onecall(dummy_onecall_sparse)
    assert snapshot.feels_like_kelvin == 270.0
    assert snapshot.conditions == ()
    assert snapshot.alerts == ()


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "ok",
        {"current": []},
        {"current": {"feels_like": "warm"}},
        {"current": {"dt": True}},
        {"current": {"weather": {"main": "Clear"}}},
        {"current": {"weather": ["Clear"]}},
        {"alerts": [{"event": 3}]},
        {"current": {"feels_like": float("nan")}},
        {"current": {"feels_like": float("inf")}},
        {"current": {"dt": float("-inf")}},
    ],
)
def test_wrong_shapes_are_upstream_errors(payload):
    with pytest.raises(UpstreamError):
        decode_onecall(payload)


def test_http_error_status_is_upstream_error(upstream):
    upstream.handler = lambda request: httpx.Response(401, json={"cod": 401, "message": "Invalid API key"})

    with pytest.raises(UpstreamError) as excinfo:
        fetch(upstream)

    assert excinfo.value.status == 401


def test_network_failure_is_upstream_error(upstream):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    upstream.handler = refuse

    with pytest.raises(UpstreamError):
        fetch(upstream)


def test_non_json_body_is_upstream_error(upstream):
    upstream.handler = lambda request: httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(UpstreamError):
        fetch(upstream)
