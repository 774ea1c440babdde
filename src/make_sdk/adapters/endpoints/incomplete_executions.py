"""Endpoint: ejecuciones incompletas (DLQ)."""

from __future__ import annotations

import json
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint
from make_sdk.core.domain.models import (
    IncompleteExecution,
    IncompleteExecutionUpdate,
    RetryIncompleteExecutionsBody,
    UpdateIncompleteExecutionBody,
)


class IncompleteExecutions(Endpoint):
    """Ejecuciones que se detuvieron con error y quedaron guardadas para reintentar.

    Sus logs se leen con `Executions.list_for_incomplete_execution`.
    """

    async def list(self, scenario_id: int) -> list[IncompleteExecution]:
        result = await self._fetch("/dlqs", {"query": {"scenarioId": scenario_id}})
        return [IncompleteExecution.model_validate(item) for item in result["dlqs"]]

    async def get(self, incomplete_execution_id: str) -> IncompleteExecution:
        result = await self._fetch(f"/dlqs/{incomplete_execution_id}")
        return IncompleteExecution.model_validate(result["dlq"])

    async def update(
        self,
        incomplete_execution_id: str,
        body: UpdateIncompleteExecutionBody,
    ) -> IncompleteExecutionUpdate:
        """Corrige el blueprint guardado; un blueprint en objeto viaja como JSON en texto."""

        payload: dict[str, Any] = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        if isinstance(payload.get("blueprint"), dict):
            payload["blueprint"] = json.dumps(payload["blueprint"], separators=(",", ":"), ensure_ascii=False)
        result = await self._fetch(
            f"/dlqs/{incomplete_execution_id}",
            {"method": "PATCH", "body": payload},
        )
        return IncompleteExecutionUpdate.model_validate(result["dlq"])

    async def retry(self, incomplete_execution_id: str) -> None:
        await self._fetch(f"/dlqs/{incomplete_execution_id}/retry", {"method": "POST"})

    async def retry_multiple(self, scenario_id: int, body: RetryIncompleteExecutionsBody) -> None:
        await self._fetch(
            "/dlqs/retry",
            {"method": "POST", "query": {"scenarioId": scenario_id}, "body": body},
        )

    async def bundle(self, incomplete_execution_id: str) -> dict[str, Any]:
        """Datos (bundle) con los que falló la ejecución."""

        result = await self._fetch(f"/dlqs/{incomplete_execution_id}/bundle")
        return result["response"]
