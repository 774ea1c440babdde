"""Endpoint: organizaciones."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint, pagination_query
from make_sdk.core.domain.models import (
    CreateOrganizationBody,
    Organization,
    Pagination,
    UpdateOrganizationBody,
)


class Organizations(Endpoint):
    """Organizaciones: agrupan equipos y comparten licencia y zona."""

    async def list(
        self,
        *,
        cols: Sequence[str] | None = None,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[Organization]:
        result = await self._fetch(
            "/organizations",
            {"query": {"cols": cols, "pg": pagination_query(pg)}},
        )
        return [Organization.model_validate(item) for item in result["organizations"]]

    async def get(self, organization_id: int, *, wait: bool | None = None) -> Organization:
        result = await self._fetch(f"/organizations/{organization_id}", {"query": {"wait": wait}})
        return Organization.model_validate(result["organization"])

    async def create(self, body: CreateOrganizationBody) -> Organization:
        result = await self._fetch("/organizations", {"method": "POST", "body": body})
        return Organization.model_validate(result["organization"])

    async def update(self, organization_id: int, body: UpdateOrganizationBody) -> Organization:
        result = await self._fetch(f"/organizations/{organization_id}", {"method": "PATCH", "body": body})
        return Organization.model_validate(result["organization"])

    async def delete(self, organization_id: int) -> None:
        await self._fetch(
            f"/organizations/{organization_id}",
            {"method": "DELETE", "query": {"confirmed": True}},
        )
