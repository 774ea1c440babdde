"""Fixtures compartidas.

- `StubResponse`/`StubTransport`: transporte mínimo para probar el Core sin
  httpx.
- `MockApi`: rutas `"METHOD url"` servidas con `httpx.MockTransport` detrás
  del `HttpxTransport` real.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from make_sdk.adapters.http_client import HttpxTransport
from make_sdk.client import Make
from make_sdk.core.config import MakeSettings, get_user_env_file

API_KEY = "1a2b3c4d-0000-4000-8000-123456789abc"
ZONE = "make.local"
BASE = f"https://{ZONE}/api/v2"


@dataclass
class StubResponse:
    status_code: int = 200
    body: str = "{}"
    content_type: str | None = "application/json"
    reason_phrase: str = "OK"

    @property
    def headers(self) -> dict[str, str]:
        return {"content-type": self.content_type} if self.content_type else {}

    async def json(self) -> Any:
        return json.loads(self.body)

    async def text(self) -> str:
        return self.body


@dataclass
class StubTransport:
    response: StubResponse = field(default_factory=StubResponse)
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def __call__(
        self,
        url: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: str | bytes | None,
    ) -> StubResponse:
        self.calls.append({"url": url, "method": method, "headers": dict(headers), "body": body})
        return self.response

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


class MockApi:
    """Sirve respuestas por `"METHOD url"` y guarda las peticiones recibidas."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[Any, int]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, route: str, content: Any, status: int = 200) -> None:
        if " " not in route:
            route = f"GET {route}"
        method, url = route.split(" ", 1)
        if url.startswith("/"):
            url = f"{BASE}{url}"
        self.routes[f"{method} {url}"] = (content, status)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.method} {request.url}"
        if key not in self.routes:
            raise AssertionError(f"Unmocked HTTP request: {key}")
        content, status = self.routes[key]
        if isinstance(content, str):
            return httpx.Response(status, text=content)
        return httpx.Response(status, json=content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def api() -> MockApi:
    return MockApi()


@pytest.fixture
async def make(api: MockApi):
    client = httpx.AsyncClient(transport=httpx.MockTransport(api.handler))
    async with Make(API_KEY, ZONE, transport=HttpxTransport(client)) as sdk:
        yield sdk
    await client.aclose()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in ("MAKE_API_KEY", "MAKE_ZONE", "MAKE_API_VERSION", "MAKE_PROTOCOL", "MAKE_HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setitem(MakeSettings.model_config, "env_file", (".env", str(get_user_env_file())))
