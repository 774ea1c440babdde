"""Endpoint: usuarios."""

from __future__ import annotations

from make_sdk.adapters.endpoints.base import Endpoint
from make_sdk.core.domain.models import User


class Users(Endpoint):
    async def me(self) -> User:
        """Usuario autenticado con el token actual."""

        result = await self._fetch("/users/me")
        return User.model_validate(result["authUser"])
