"""Endpoint: carpetas de escenarios."""

from __future__ import annotations

from collections.abc import Sequence

from make_sdk.adapters.endpoints.base import Endpoint, compact
from make_sdk.core.domain.models import CreateFolderBody, Folder


class Folders(Endpoint):
    async def list(self, team_id: int, *, cols: Sequence[str] | None = None) -> list[Folder]:
        result = await self._fetch("/scenarios-folders", {"query": {"cols": cols, "teamId": team_id}})
        return [Folder.model_validate(item) for item in result["scenariosFolders"]]

    async def create(self, body: CreateFolderBody) -> Folder:
        result = await self._fetch("/scenarios-folders", {"method": "POST", "body": body})
        return Folder.model_validate(result["scenarioFolder"])

    async def update(
        self,
        folder_id: int,
        *,
        name: str | None = None,
        cols: Sequence[str] | None = None,
    ) -> Folder:
        result = await self._fetch(
            f"/scenarios-folders/{folder_id}",
            {"method": "PATCH", "query": {"cols": cols}, "body": compact({"name": name})},
        )
        return Folder.model_validate(result["scenarioFolder"])

    async def delete(self, folder_id: int) -> None:
        await self._fetch(f"/scenarios-folders/{folder_id}", {"method": "DELETE"})
