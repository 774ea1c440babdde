"""Endpoint: data stores."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint, pagination_query
from make_sdk.adapters.endpoints.data_store_records import DataStoreRecords
from make_sdk.core.domain.models import (
    CreateDataStoreBody,
    DataStore,
    Pagination,
    UpdateDataStoreBody,
)
from make_sdk.core.interfaces.transport import FetchFunction


class DataStores(Endpoint):
    """Data stores: bases de datos simples compartidas entre escenarios.

    Los registros de cada data store cuelgan de `records`.
    """

    def __init__(self, fetch: FetchFunction) -> None:
        super().__init__(fetch)
        self.records = DataStoreRecords(fetch)

    async def list(
        self,
        team_id: int,
        *,
        cols: Sequence[str] | None = None,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[DataStore]:
        result = await self._fetch(
            "/data-stores",
            {"query": {"teamId": team_id, "cols": cols, "pg": pagination_query(pg)}},
        )
        return [DataStore.model_validate(item) for item in result["dataStores"]]

    async def create(self, body: CreateDataStoreBody) -> DataStore:
        result = await self._fetch("/data-stores", {"method": "POST", "body": body})
        return DataStore.model_validate(result["dataStore"])

    async def get(self, data_store_id: int) -> DataStore:
        result = await self._fetch(f"/data-stores/{data_store_id}")
        return DataStore.model_validate(result["dataStore"])

    async def update(self, data_store_id: int, body: UpdateDataStoreBody) -> DataStore:
        result = await self._fetch(f"/data-stores/{data_store_id}", {"method": "PATCH", "body": body})
        return DataStore.model_validate(result["dataStore"])

    async def delete(self, data_store_id: int) -> None:
        await self._fetch(
            f"/data-stores/{data_store_id}",
            {"method": "DELETE", "query": {"confirmed": True}},
        )
