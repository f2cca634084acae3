import json
from typing import Any, Callable, List

import httpx
import pytest

from gusto_mcp.core.config import Settings, get_settings
from gusto_mcp.core.dispatcher import Dispatcher
from gusto_mcp.services.gusto_client import GustoClient

BASE_URL = "https://api.gusto.test/v1"
TOKEN = "test-token-123"


class StubUpstream:
    """
    Deterministic stand-in for the Gusto API, plugged in through httpx.MockTransport.
    Every request is recorded; the response comes from `responder`.
    """

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None):
        self.requests: List[httpx.Request] = []
        self.responder = responder or (lambda request: httpx.Response(200, json={}))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def reply_json(self, payload: Any, status_code: int = 200):
        self.responder = lambda request: httpx.Response(status_code, json=payload)

    def reply_text(self, text: str, status_code: int):
        self.responder = lambda request: httpx.Response(status_code, text=text)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(monkeypatch) -> Settings:
    monkeypatch.setenv("GUSTO_ACCESS_TOKEN", TOKEN)
    monkeypatch.setenv("GUSTO_API_BASE_URL", BASE_URL)
    return Settings(_env_file=None)


@pytest.fixture
def upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def client(upstream) -> GustoClient:
    return GustoClient(access_token=TOKEN, base_url=BASE_URL, http_client=upstream.http_client())


@pytest.fixture
def dispatcher(client) -> Dispatcher:
    return Dispatcher(client)
