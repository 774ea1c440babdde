"""Endpoint: conexiones con apps externas."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint
from make_sdk.core.domain.models import Connection, CreateConnectionBody


class Connections(Endpoint):
    async def list(
        self,
        team_id: int,
        *,
        type: Sequence[str] | None = None,
        cols: Sequence[str] | None = None,
    ) -> list[Connection]:
        result = await self._fetch(
            "/connections",
            {"query": {"teamId": team_id, "type": type, "cols": cols}},
        )
        return [Connection.model_validate(item) for item in result["connections"]]

    async def get(self, connection_id: int, *, cols: Sequence[str] | None = None) -> Connection:
        result = await self._fetch(f"/connections/{connection_id}", {"query": {"cols": cols}})
        return Connection.model_validate(result["connection"])

    async def create(self, body: CreateConnectionBody) -> Connection:
        """Crea una conexión.

        `teamId` va en la query; el cuerpo son los parámetros de `data` más
        `accountName` (nombre visible) y `accountType` (tipo de cuenta).
        """

        payload = {k: v for k, v in (body.data or {}).items() if k not in ("name", "teamId")}
        payload.update({"accountName": body.name, "accountType": body.account_name})
        result = await self._fetch(
            "/connections",
            {"method": "POST", "query": {"teamId": body.team_id}, "body": payload},
        )
        return Connection.model_validate(result["connection"])

    async def update(self, connection_id: int, data: Mapping[str, Any]) -> bool:
        result = await self._fetch(
            f"/connections/{connection_id}/set-data",
            {"method": "POST", "body": dict(data)},
        )
        return bool(result["changed"])

    async def rename(self, connection_id: int, name: str, *, cols: Sequence[str] | None = None) -> Connection:
        result = await self._fetch(
            f"/connections/{connection_id}",
            {"method": "PATCH", "query": {"cols": cols}, "body": {"name": name}},
        )
        return Connection.model_validate(result["connection"])

    async def verify(self, connection_id: int) -> bool:
        """Comprueba que las credenciales de la conexión siguen siendo válidas."""

        result = await self._fetch(f"/connections/{connection_id}/test", {"method": "POST"})
        return bool(result["verified"])

    async def scoped(self, connection_id: int, scope: Sequence[str]) -> bool:
        result = await self._fetch(
            f"/connections/{connection_id}/scoped",
            {"method": "POST", "body": {"scope": list(scope)}},
        )
        return bool(result["connection"]["scoped"])

    async def list_editable_parameters(self, connection_id: int) -> list[str]:
        result = await self._fetch(f"/connections/{connection_id}/editable-data-schema")
        return list(result["editableParameters"])

    async def delete(self, connection_id: int) -> None:
        await self._fetch(f"/connections/{connection_id}", {"method": "DELETE", "query": {"confirmed": True}})
