"""Piezas comunes de los endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from make_sdk.core.domain.models import Pagination
from make_sdk.core.interfaces.transport import FetchFunction


def compact(values: Mapping[str, Any]) -> dict[str, Any]:
    """Quita las claves con valor `None` de un cuerpo de petición."""

    return {key: value for key, value in values.items() if value is not None}


def pagination_query(pg: Pagination | Mapping[str, Any] | None) -> dict[str, Any] | None:
    if pg is None:
        return None
    if isinstance(pg, Pagination):
        return pg.as_query()
    return dict(pg)


class Endpoint:
    """Base de los endpoints: solo guarda la función `fetch` del despachador."""

    def __init__(self, fetch: FetchFunction) -> None:
        self._fetch = fetch
