"""Punto de entrada del SDK: la clase `Make`.

Compone el despachador (Core) con el transporte y expone un atributo por
recurso (`make.scenarios`, `make.data_stores`, ...).
"""

from __future__ import annotations

from typing import Any

from make_sdk.adapters.endpoints import (
    Blueprints,
    Connections,
    DataStores,
    Enums,
    Executions,
    Folders,
    Hooks,
    IncompleteExecutions,
    Keys,
    Organizations,
    Scenarios,
    Teams,
    Users,
)
from make_sdk.adapters.http_client import HttpxTransport
from make_sdk.core.config import MakeSettings
from make_sdk.core.domain.errors import MakeError
from make_sdk.core.interfaces.transport import FetchOptions, Transport
from make_sdk.core.services.dispatcher import RequestDispatcher


class Make:
    """Cliente de la API de Make.

    Example:
        async with Make(api_key, "eu1.make.com") as make:
            user = await make.users.me()

    `zone` y `version` son de solo lectura; `protocol` se puede cambiar (p.ej.
    a `http` contra un entorno local).
    """

    def __init__(
        self,
        token: str,
        zone: str,
        version: int = 2,
        *,
        transport: Transport | None = None,
        settings: MakeSettings | None = None,
    ) -> None:
        """
        Args:
            token: API key de Make o access token OAuth2.
            zone: Zona de Make (p.ej. eu1.make.com).
            version: Versión de la API (por defecto 2).
            transport: Transporte inyectado. Si falta, se crea un
                `HttpxTransport` que el cliente cierra en `aclose()`.
            settings: Solo se usa para configurar el transporte por defecto.
        """

        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport(settings=settings)
            transport = self._owned_transport

        self._dispatcher = RequestDispatcher(token, zone, version, transport=transport)

        fetch = self._dispatcher.fetch
        self.users = Users(fetch)
        self.scenarios = Scenarios(fetch)
        self.blueprints = Blueprints(fetch)
        self.data_stores = DataStores(fetch)
        self.executions = Executions(fetch)
        self.incomplete_executions = IncompleteExecutions(fetch)
        self.folders = Folders(fetch)
        self.hooks = Hooks(fetch)
        self.organizations = Organizations(fetch)
        self.teams = Teams(fetch)
        self.keys = Keys(fetch)
        self.connections = Connections(fetch)
        self.enums = Enums(fetch)

    @classmethod
    def from_settings(cls, settings: MakeSettings | None = None, *, transport: Transport | None = None) -> Make:
        """Construye el cliente desde `MakeSettings` (env vars / `.env`).

        Raises:
            MakeError: si falta la API key o la zona.
        """

        settings = settings or MakeSettings()
        if settings.api_key is None:
            raise MakeError("MAKE_API_KEY is not set")
        if not settings.zone:
            raise MakeError("MAKE_ZONE is not set")

        make = cls(
            settings.api_key.get_secret_value(),
            settings.zone,
            settings.api_version,
            transport=transport,
            settings=settings,
        )
        make.protocol = settings.protocol
        return make

    @property
    def zone(self) -> str:
        return self._dispatcher.zone

    @property
    def version(self) -> int:
        return self._dispatcher.version

    @property
    def protocol(self) -> str:
        return self._dispatcher.protocol

    @protocol.setter
    def protocol(self, value: str) -> None:
        self._dispatcher.protocol = value

    async def fetch(self, path: str, options: FetchOptions | None = None) -> Any:
        """Llamada directa a la API (ver `RequestDispatcher.fetch`)."""

        return await self._dispatcher.fetch(path, options)

    async def aclose(self) -> None:
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> Make:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
