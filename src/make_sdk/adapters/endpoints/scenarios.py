"""Endpoint: escenarios.

Los cuerpos de creación/actualización se normalizan antes de enviarse:
- `blueprint`/`scheduling` en texto se decodifican;
- `blueprint.scheduling` sube a `scheduling`;
- `blueprint.interface` y `blueprint.io` se mueven a `metadata`;
- `blueprint` y `scheduling` viajan re-codificados como texto JSON.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint, compact, pagination_query
from make_sdk.core.domain.models import (
    CreateScenarioBody,
    Pagination,
    RunScenarioResponse,
    Scenario,
    ScenarioInterface,
    UpdateScenarioBody,
)


def _decode(value: Any) -> Any:
    return json.loads(value) if isinstance(value, str) else value


def _encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def normalize_payload(payload: CreateScenarioBody | UpdateScenarioBody) -> dict[str, Any]:
    data = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    blueprint: dict[str, Any] | None = _decode(data.get("blueprint"))
    scheduling: dict[str, Any] | None = _decode(data.get("scheduling"))
    metadata: dict[str, list[Any]] = {"input_spec": [], "output_spec": []}

    if blueprint and blueprint.get("scheduling"):
        scheduling = blueprint["scheduling"]
        blueprint = {k: v for k, v in blueprint.items() if k != "scheduling"}
    if blueprint and blueprint.get("interface"):
        metadata["input_spec"] = blueprint["interface"].get("input") or []
        metadata["output_spec"] = blueprint["interface"].get("output") or []
        blueprint = {k: v for k, v in blueprint.items() if k != "interface"}
    if blueprint and blueprint.get("io"):
        metadata["input_spec"] = blueprint["io"].get("input_spec") or []
        metadata["output_spec"] = blueprint["io"].get("output_spec") or []
        blueprint = {k: v for k, v in blueprint.items() if k != "io"}

    data["scheduling"] = _encode(scheduling) if scheduling else None
    data["blueprint"] = _encode(blueprint) if blueprint else None
    data["metadata"] = metadata
    return compact(data)


class Scenarios(Endpoint):
    """Escenarios: automatizaciones compuestas por módulos."""

    async def list(
        self,
        team_id: int,
        *,
        cols: Sequence[str] | None = None,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[Scenario]:
        result = await self._fetch(
            "/scenarios",
            {"query": {"teamId": team_id, "cols": cols, "pg": pagination_query(pg)}},
        )
        return [Scenario.model_validate(item) for item in result["scenarios"]]

    async def list_in_organization(
        self,
        organization_id: int,
        *,
        cols: Sequence[str] | None = None,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[Scenario]:
        result = await self._fetch(
            "/scenarios",
            {"query": {"organizationId": organization_id, "cols": cols, "pg": pagination_query(pg)}},
        )
        return [Scenario.model_validate(item) for item in result["scenarios"]]

    async def get(self, scenario_id: int, *, cols: Sequence[str] | None = None) -> Scenario:
        result = await self._fetch(f"/scenarios/{scenario_id}", {"query": {"cols": cols}})
        return Scenario.model_validate(result["scenario"])

    async def create(
        self,
        body: CreateScenarioBody | Mapping[str, Any],
        *,
        cols: Sequence[str] | None = None,
        confirmed: bool | None = None,
    ) -> Scenario:
        """Crea un escenario.

        `confirmed=True` confirma la instalación de apps que la organización
        aún no tiene.
        """

        payload = CreateScenarioBody.model_validate(body) if isinstance(body, Mapping) else body
        result = await self._fetch(
            "/scenarios",
            {
                "method": "POST",
                "query": {"cols": cols, "confirmed": confirmed},
                "body": normalize_payload(payload),
            },
        )
        return Scenario.model_validate(result["scenario"])

    async def update(
        self,
        scenario_id: int,
        body: UpdateScenarioBody | Mapping[str, Any],
        *,
        cols: Sequence[str] | None = None,
        confirmed: bool | None = None,
    ) -> Scenario:
        payload = UpdateScenarioBody.model_validate(body) if isinstance(body, Mapping) else body
        result = await self._fetch(
            f"/scenarios/{scenario_id}",
            {
                "method": "PATCH",
                "query": {"cols": cols, "confirmed": confirmed},
                "body": normalize_payload(payload),
            },
        )
        return Scenario.model_validate(result["scenario"])

    async def delete(self, scenario_id: int) -> None:
        await self._fetch(f"/scenarios/{scenario_id}", {"method": "DELETE"})

    async def activate(self, scenario_id: int) -> bool:
        result = await self._fetch(f"/scenarios/{scenario_id}/start", {"method": "POST"})
        return result["scenario"].get("isActive") is True

    async def deactivate(self, scenario_id: int) -> bool:
        result = await self._fetch(f"/scenarios/{scenario_id}/stop", {"method": "POST"})
        return result["scenario"].get("isActive") is False

    async def run(
        self,
        scenario_id: int,
        data: Mapping[str, Any] | None = None,
        *,
        responsive: bool = True,
        callback_url: str | None = None,
    ) -> RunScenarioResponse:
        """Ejecuta el escenario.

        Con `responsive=True` la API espera a que termine y devuelve sus
        `outputs`; si no, responde en cuanto la ejecución queda encolada.
        """

        result = await self._fetch(
            f"/scenarios/{scenario_id}/run",
            {
                "method": "POST",
                "body": compact(
                    {
                        "data": dict(data) if data is not None else None,
                        "responsive": responsive,
                        "callbackUrl": callback_url,
                    }
                ),
            },
        )
        return RunScenarioResponse.model_validate(result)

    async def get_interface(self, scenario_id: int) -> ScenarioInterface:
        result = await self._fetch(f"/scenarios/{scenario_id}/interface")
        interface = result.get("interface") or {}
        return ScenarioInterface(
            input=interface.get("input") or [],
            output=interface.get("output") or [],
        )

    async def set_interface(
        self,
        scenario_id: int,
        interface: ScenarioInterface | Mapping[str, Any],
    ) -> ScenarioInterface:
        if isinstance(interface, ScenarioInterface):
            interface = interface.model_dump(mode="json", by_alias=True)
        result = await self._fetch(
            f"/scenarios/{scenario_id}/interface",
            {"method": "PATCH", "body": {"interface": dict(interface)}},
        )
        return ScenarioInterface.model_validate(result["interface"])
