"""Transporte por defecto sobre httpx.

`HttpxTransport` implementa `core.interfaces.transport.Transport`: envía la
petición que compone el despachador y expone la respuesta con la interfaz
mínima que el Core espera. Para tests basta con construir el
`httpx.AsyncClient` con un `httpx.MockTransport`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from make_sdk.core.config import MakeSettings


def build_async_client(
    settings: MakeSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con el timeout configurado.

    Los headers de identificación/autenticación los pone el despachador, no
    el cliente httpx.
    """

    settings = settings or MakeSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )


class HttpxResponse:
    """Adapta `httpx.Response` al protocolo `TransportResponse`."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def reason_phrase(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    async def json(self) -> Any:
        await self._response.aread()
        return self._response.json()

    async def text(self) -> str:
        await self._response.aread()
        return self._response.text


class HttpxTransport:
    """Envía peticiones con un `httpx.AsyncClient`.

    Si no se le pasa un cliente, crea uno con `build_async_client` y lo cierra
    en `aclose()`. Un cliente ajeno nunca se cierra aquí.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: MakeSettings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_async_client(settings)

    async def __call__(
        self,
        url: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: str | bytes | None,
    ) -> HttpxResponse:
        response = await self._client.request(method, url, headers=dict(headers), content=body)
        return HttpxResponse(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
