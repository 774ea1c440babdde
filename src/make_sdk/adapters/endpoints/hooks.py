"""Endpoint: hooks (webhooks y mailhooks)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint
from make_sdk.core.domain.models import CreateHookBody, Hook, HookPing


class Hooks(Endpoint):
    async def list(
        self,
        team_id: int,
        *,
        type_name: str | None = None,
        assigned: bool | None = None,
        view_for_scenario_id: int | None = None,
    ) -> list[Hook]:
        result = await self._fetch(
            "/hooks",
            {
                "query": {
                    "teamId": team_id,
                    "typeName": type_name,
                    "assigned": assigned,
                    "viewForScenarioId": view_for_scenario_id,
                }
            },
        )
        return [Hook.model_validate(item) for item in result["hooks"]]

    async def create(self, body: CreateHookBody) -> Hook:
        """Crea un hook.

        Los parámetros de `data` viajan al mismo nivel que `name`, `teamId` y
        `typeName`.
        """

        payload = dict(body.data or {})
        payload.update({"name": body.name, "teamId": body.team_id, "typeName": body.type_name})
        result = await self._fetch("/hooks", {"method": "POST", "body": payload})
        return Hook.model_validate(result["hook"])

    async def get(self, hook_id: int) -> Hook:
        result = await self._fetch(f"/hooks/{hook_id}")
        return Hook.model_validate(result["hook"])

    async def rename(self, hook_id: int, name: str) -> Hook:
        result = await self._fetch(f"/hooks/{hook_id}", {"method": "PATCH", "body": {"name": name}})
        return Hook.model_validate(result["hook"])

    async def update(self, hook_id: int, data: Mapping[str, Any]) -> bool:
        """Sustituye los parámetros del hook; devuelve si algo cambió."""

        result = await self._fetch(f"/hooks/{hook_id}/set-data", {"method": "POST", "body": dict(data)})
        return bool(result["changed"])

    async def delete(self, hook_id: int) -> None:
        await self._fetch(f"/hooks/{hook_id}", {"method": "DELETE", "query": {"confirmed": True}})

    async def ping(self, hook_id: int) -> HookPing:
        return HookPing.model_validate(await self._fetch(f"/hooks/{hook_id}/ping"))

    async def enable(self, hook_id: int) -> None:
        await self._fetch(f"/hooks/{hook_id}/enable", {"method": "POST"})

    async def disable(self, hook_id: int) -> None:
        await self._fetch(f"/hooks/{hook_id}/disable", {"method": "POST"})

    async def learn_start(self, hook_id: int) -> None:
        """Pone el hook en modo aprendizaje de estructura de datos."""

        await self._fetch(f"/hooks/{hook_id}/learn-start", {"method": "POST"})

    async def learn_stop(self, hook_id: int) -> None:
        await self._fetch(f"/hooks/{hook_id}/learn-stop", {"method": "POST"})
