"""Contratos del transporte HTTP.

El Core no hace I/O por sí mismo: recibe un `Transport` inyectado que envía
la petición y devuelve una respuesta. Así el despachador se prueba con un
stub y el adaptador `httpx` se puede sustituir sin tocar el Core.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypedDict, runtime_checkable


@runtime_checkable
class TransportResponse(Protocol):
    """Respuesta mínima que el despachador necesita.

    `json()` y `text()` consumen el cuerpo; se llama a uno de los dos, una vez.
    """

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    async def json(self) -> Any: ...

    async def text(self) -> str: ...


@runtime_checkable
class Transport(Protocol):
    """Envía una petición ya compuesta (URL absoluta, headers, cuerpo en texto)."""

    async def __call__(
        self,
        url: str,
        *,
        method: str,
        headers: Mapping[str, str],
        body: str | bytes | None,
    ) -> TransportResponse: ...


class FetchOptions(TypedDict, total=False):
    """Descriptor de una petición lógica a la API."""

    method: str
    headers: Mapping[str, str]
    body: Any
    query: Mapping[str, Any]


class FetchFunction(Protocol):
    """Firma de `RequestDispatcher.fetch`, tal como la reciben los endpoints."""

    async def __call__(self, path: str, options: FetchOptions | None = None) -> Any: ...
