"""Endpoint: registros de data stores."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from make_sdk.adapters.endpoints.base import Endpoint, compact, pagination_query
from make_sdk.core.domain.models import DataStoreRecord, Pagination


class DataStoreRecords(Endpoint):
    """Registros (clave -> datos) dentro de un data store."""

    async def list(
        self,
        data_store_id: int,
        *,
        pg: Pagination | Mapping[str, Any] | None = None,
    ) -> list[DataStoreRecord]:
        result = await self._fetch(
            f"/data-stores/{data_store_id}/data",
            {"query": {"pg": pagination_query(pg)}},
        )
        return [DataStoreRecord.model_validate(item) for item in result["records"]]

    async def create(
        self,
        data_store_id: int,
        data: Mapping[str, Any],
        *,
        key: str | None = None,
    ) -> DataStoreRecord:
        """Crea un registro. Sin `key`, la API genera una."""

        result = await self._fetch(
            f"/data-stores/{data_store_id}/data",
            {"method": "POST", "body": compact({"key": key, "data": dict(data)})},
        )
        return DataStoreRecord.model_validate(result)

    async def update(self, data_store_id: int, key: str, data: Mapping[str, Any]) -> DataStoreRecord:
        """Actualiza parcialmente (PATCH) los datos de un registro."""

        result = await self._fetch(
            f"/data-stores/{data_store_id}/data/{key}",
            {"method": "PATCH", "body": dict(data)},
        )
        return DataStoreRecord.model_validate(result)

    async def replace(self, data_store_id: int, key: str, data: Mapping[str, Any]) -> DataStoreRecord:
        """Sustituye (PUT) los datos de un registro."""

        result = await self._fetch(
            f"/data-stores/{data_store_id}/data/{key}",
            {"method": "PUT", "body": dict(data)},
        )
        return DataStoreRecord.model_validate(result)

    async def delete(self, data_store_id: int, keys: Sequence[str]) -> None:
        await self._fetch(
            f"/data-stores/{data_store_id}/data",
            {"method": "DELETE", "query": {"confirmed": True}, "body": {"keys": list(keys)}},
        )

    async def delete_all(self, data_store_id: int, except_keys: Sequence[str] | None = None) -> None:
        await self._fetch(
            f"/data-stores/{data_store_id}/data",
            {
                "method": "DELETE",
                "query": {"confirmed": True},
                "body": compact(
                    {
                        "all": True,
                        "exceptKeys": list(except_keys) if except_keys is not None else None,
                    }
                ),
            },
        )
