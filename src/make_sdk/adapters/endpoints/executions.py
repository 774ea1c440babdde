"""Endpoint: ejecuciones (logs) de escenarios."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint, pagination_query
from make_sdk.core.domain.models import Execution, ExecutionDetail, Pagination


class Executions(Endpoint):
    async def list(
        self,
        scenario_id: int,
        *,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[Execution]:
        result = await self._fetch(f"/scenarios/{scenario_id}/logs", {"query": {"pg": pagination_query(pg)}})
        return [Execution.model_validate(item) for item in result["scenarioLogs"]]

    async def list_for_incomplete_execution(
        self,
        incomplete_execution_id: str,
        *,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[Execution]:
        result = await self._fetch(
            f"/dlqs/{incomplete_execution_id}/logs",
            {"query": {"pg": pagination_query(pg)}},
        )
        return [Execution.model_validate(item) for item in result["scenarioLogs"]]

    async def get(self, scenario_id: int, execution_id: str) -> Execution:
        result = await self._fetch(f"/scenarios/{scenario_id}/logs/{execution_id}")
        return Execution.model_validate(result["scenarioLogs"])

    async def get_detail(self, scenario_id: int, execution_id: str) -> ExecutionDetail:
        """Estado (`RUNNING`, `SUCCESS`, `WARNING`, `ERROR`) y salidas de una ejecución."""

        return ExecutionDetail.model_validate(
            await self._fetch(f"/scenarios/{scenario_id}/executions/{execution_id}")
        )

    async def get_for_incomplete_execution(self, incomplete_execution_id: str, execution_id: str) -> Execution:
        result = await self._fetch(f"/dlqs/{incomplete_execution_id}/logs/{execution_id}")
        return Execution.model_validate(result["scenarioLogs"])
