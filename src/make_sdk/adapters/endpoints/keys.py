"""Endpoint: keys (secretos usados por las apps)."""

from __future__ import annotations

from collections.abc import Sequence

from make_sdk.adapters.endpoints.base import Endpoint
from make_sdk.core.domain.models import CreateKeyBody, Key, KeyType, UpdateKeyBody


class Keys(Endpoint):
    async def list(
        self,
        team_id: int,
        *,
        type_name: str | None = None,
        cols: Sequence[str] | None = None,
    ) -> list[Key]:
        result = await self._fetch(
            "/keys",
            {"query": {"teamId": team_id, "typeName": type_name, "cols": cols}},
        )
        return [Key.model_validate(item) for item in result["keys"]]

    async def get(self, key_id: int, *, cols: Sequence[str] | None = None) -> Key:
        result = await self._fetch(f"/keys/{key_id}", {"query": {"cols": cols}})
        return Key.model_validate(result["key"])

    async def create(self, body: CreateKeyBody) -> Key:
        result = await self._fetch("/keys", {"method": "POST", "body": body})
        return Key.model_validate(result["key"])

    async def update(self, key_id: int, body: UpdateKeyBody) -> Key:
        result = await self._fetch(f"/keys/{key_id}", {"method": "PATCH", "body": body})
        return Key.model_validate(result["key"])

    async def delete(self, key_id: int) -> None:
        await self._fetch(f"/keys/{key_id}", {"method": "DELETE", "query": {"confirmed": True}})

    async def types(self) -> list[KeyType]:
        result = await self._fetch("/keys/types")
        return [KeyType.model_validate(item) for item in result["keysTypes"]]
