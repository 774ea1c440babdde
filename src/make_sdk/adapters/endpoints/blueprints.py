"""Endpoint: blueprints de escenarios."""

from __future__ import annotations

from make_sdk.adapters.endpoints.base import Endpoint
from make_sdk.core.domain.models import Blueprint, BlueprintVersion


class Blueprints(Endpoint):
    """Blueprints: definición (flujo de módulos) de un escenario."""

    async def get(self, scenario_id: int) -> Blueprint:
        result = await self._fetch(f"/scenarios/{scenario_id}/blueprint")
        return Blueprint.model_validate(result["response"]["blueprint"])

    async def versions(self, scenario_id: int) -> list[BlueprintVersion]:
        result = await self._fetch(f"/scenarios/{scenario_id}/blueprints")
        return [BlueprintVersion.model_validate(item) for item in result["scenariosBlueprints"]]
