import json

import httpx
import pytest

import coinspot.coinspot_client as coinspot_client
from coinspot import CoinSpot


class RecordingTransport(httpx.MockTransport):
    """记录所有请求并返回固定 JSON 的 transport"""

    def __init__(self, payload=None):
        self.payload = {"status": "ok"} if payload is None else payload
        self.requests = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.payload, (bytes, str)):
            return httpx.Response(200, content=self.payload)
        return httpx.Response(200, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def fixed_clock(monkeypatch):
    monkeypatch.setattr(coinspot_client.time, "time_ns", lambda: 12345 * 1_000_000)
    return 12345


@pytest.fixture
def api(transport):
    return CoinSpot("dummy", "dummy", transport=transport)


@pytest.fixture
def public_api(transport):
    return CoinSpot(transport=transport)
