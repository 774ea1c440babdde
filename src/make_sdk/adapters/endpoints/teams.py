"""Endpoint: equipos."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint, pagination_query
from make_sdk.core.domain.models import CreateTeamBody, Pagination, Team


class Teams(Endpoint):
    """Equipos: controlan el acceso a escenarios, conexiones y data stores."""

    async def list(
        self,
        organization_id: int,
        *,
        cols: Sequence[str] | None = None,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[Team]:
        result = await self._fetch(
            "/teams",
            {"query": {"organizationId": organization_id, "cols": cols, "pg": pagination_query(pg)}},
        )
        return [Team.model_validate(item) for item in result["teams"]]

    async def get(self, team_id: int, *, cols: Sequence[str] | None = None) -> Team:
        result = await self._fetch(f"/teams/{team_id}", {"query": {"cols": cols}})
        return Team.model_validate(result["team"])

    async def create(self, body: CreateTeamBody) -> Team:
        result = await self._fetch("/teams", {"method": "POST", "body": body})
        return Team.model_validate(result["team"])

    async def delete(self, team_id: int) -> None:
        await self._fetch(f"/teams/{team_id}", {"method": "DELETE", "query": {"confirmed": True}})
