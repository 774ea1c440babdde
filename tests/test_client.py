from __future__ import annotations

import httpx
import pytest
from pydantic import SecretStr

from make_sdk import Make, MakeError
from make_sdk.adapters.http_client import HttpxTransport
from make_sdk.core.config import MakeSettings
from make_sdk.core.services.dispatcher import USER_AGENT

from .conftest import API_KEY, ZONE, MockApi, StubTransport


async def test_users_me_goes_through_httpx_transport(make: Make, api: MockApi) -> None:
    api.add("/users/me", {"authUser": {"id": 1, "name": "Jane", "email": "jane@example.com", "timezoneId": 113}})

    user = await make.users.me()

    assert user.id == 1
    assert user.timezone_id == 113
    request = api.last
    assert request.headers["authorization"] == f"Token {API_KEY}"
    assert request.headers["user-agent"] == USER_AGENT


async def test_error_status_raises_make_error(make: Make, api: MockApi) -> None:
    api.add("/users/me", {"message": "Bad Request"}, 400)

    with pytest.raises(MakeError, match="Bad Request") as exc_info:
        await make.users.me()
    assert exc_info.value.status_code == 400


async def test_plain_text_error_uses_reason_phrase(make: Make, api: MockApi) -> None:
    api.add("/users/me", "Plain text error", 500)

    with pytest.raises(MakeError) as exc_info:
        await make.users.me()
    assert exc_info.value.message == "Internal Server Error"
    assert exc_info.value.status_code == 500


async def test_fetch_returns_text_for_non_json(make: Make, api: MockApi) -> None:
    api.add("/scenarios/1/blueprint.txt", "plain body")
    assert await make.fetch("/scenarios/1/blueprint.txt") == "plain body"


async def test_json_body_reaches_the_wire(make: Make, api: MockApi) -> None:
    api.add("POST /hooks", {"hook": {"id": 5}})
    await make.fetch("/hooks", {"method": "POST", "body": {"name": "x"}})
    assert api.last.headers["content-type"] == "application/json"
    assert api.last_json() == {"name": "x"}


async def test_transport_errors_propagate() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    make = Make(API_KEY, ZONE, transport=HttpxTransport(client))
    with pytest.raises(httpx.ConnectError):
        await make.users.me()
    await client.aclose()


def test_configuration_surface() -> None:
    make = Make(API_KEY, ZONE, transport=StubTransport())
    assert make.zone == ZONE
    assert make.version == 2
    assert make.protocol == "https"

    make.protocol = "http"
    assert make.protocol == "http"
    with pytest.raises(AttributeError):
        make.zone = "other"  # type: ignore[misc]


async def test_protocol_change_applies_to_requests() -> None:
    transport = StubTransport()
    make = Make(API_KEY, ZONE, 3, transport=transport)
    make.protocol = "http"
    await make.fetch("/ping")
    assert transport.last["url"] == "http://make.local/api/v3/ping"


async def test_injected_httpx_client_is_not_closed() -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    async with Make(API_KEY, ZONE, transport=HttpxTransport(client)):
        pass
    assert not client.is_closed
    await client.aclose()


async def test_default_transport_is_owned_and_closed() -> None:
    make = Make(API_KEY, ZONE, settings=MakeSettings(_env_file=None, http_timeout_seconds=5))
    transport = make._owned_transport
    assert transport is not None
    assert transport._client.timeout.read == 5
    await make.aclose()
    assert transport._client.is_closed


def test_from_settings() -> None:
    settings = MakeSettings(
        _env_file=None,
        api_key=SecretStr("oauth-token"),
        zone="us1.make.com",
        api_version=3,
        protocol="http",
    )
    make = Make.from_settings(settings, transport=StubTransport())
    assert make.zone == "us1.make.com"
    assert make.version == 3
    assert make.protocol == "http"


@pytest.mark.parametrize(
    ("api_key", "zone", "missing"),
    [(None, "eu1.make.com", "MAKE_API_KEY"), ("key", None, "MAKE_ZONE")],
)
def test_from_settings_requires_credentials(api_key: str | None, zone: str | None, missing: str) -> None:
    settings = MakeSettings(_env_file=None, api_key=api_key, zone=zone)
    with pytest.raises(MakeError, match=missing) as exc_info:
        Make.from_settings(settings, transport=StubTransport())
    assert exc_info.value.status_code is None
