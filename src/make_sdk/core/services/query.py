"""Codificación de parámetros de query.

Formato que entiende la API de Make:
- `None` nunca se emite (a ningún nivel).
- Listas: `key[]=a&key[]=b`, en orden.
- Mapas de un nivel: `key[sub]=v`, en orden.
- Más de un nivel de anidación, o un valor que no sea escalar, lista/tupla
  o mapa (p.ej. `set`, `bytes`), es un error del llamador.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Union
from urllib.parse import urlencode

Scalar = Union[str, int, float, bool]
QueryValue = Union[
    None,
    Scalar,
    Sequence[Union[Scalar, None]],
    Mapping[str, Union[Scalar, None]],
]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _stringify(key: str, value: Any) -> str:
    if isinstance(value, Mapping) or _is_sequence(value):
        raise ValueError(f"Query parameter '{key}' is nested more than one level deep.")
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"Query parameter '{key}' has unsupported type {type(value).__name__}.")


def encode_query(params: Mapping[str, QueryValue] | None) -> list[tuple[str, str]]:
    """Aplana `params` a pares `(clave, valor)` en orden de inserción."""

    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue

        if _is_sequence(value):
            for item in value:
                if item is not None:
                    pairs.append((f"{key}[]", _stringify(f"{key}[]", item)))
        elif isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                if sub_value is not None:
                    name = f"{key}[{sub_key}]"
                    pairs.append((name, _stringify(name, sub_value)))
        else:
            pairs.append((key, _stringify(key, value)))
    return pairs


def build_url(base_url: str, params: Mapping[str, QueryValue] | None = None) -> str:
    """Añade `params` codificados a `base_url`.

    Si no sobrevive ningún parámetro, devuelve `base_url` sin tocar. Si la URL
    ya trae query, se concatena con `&`.
    """

    query_string = urlencode(encode_query(params))
    if not query_string:
        return base_url
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query_string}"
