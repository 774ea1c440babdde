"""Endpoint: enumeraciones (países, regiones, zonas horarias)."""

from __future__ import annotations

from make_sdk.adapters.endpoints.base import Endpoint
from make_sdk.core.domain.models import Country, Region, Timezone


class Enums(Endpoint):
    async def countries(self) -> list[Country]:
        result = await self._fetch("/enums/countries")
        return [Country.model_validate(item) for item in result["countries"]]

    async def regions(self) -> list[Region]:
        result = await self._fetch("/enums/imt-regions")
        return [Region.model_validate(item) for item in result["imtRegions"]]

    async def timezones(self) -> list[Timezone]:
        result = await self._fetch("/enums/timezones")
        return [Timezone.model_validate(item) for item in result["timezones"]]
