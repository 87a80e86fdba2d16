from __future__ import annotations

from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from weatherfeel.core.settings import Settings
from weatherfeel.server import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", openweather_base="https://ow.test")


class Upstream:
    """Scripted provider: records every request, answers with ``handler``."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def client(settings, upstream):
    app = create_app(settings, transport=upstream.transport)
    with TestClient(app) as test_client:
        yield test_client
