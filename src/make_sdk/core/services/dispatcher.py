"""Despacho de peticiones a la API de Make.

Una llamada lógica = una invocación de `RequestDispatcher.fetch`:
1. compone headers (identificación + autenticación, siempre presentes);
2. resuelve la ruta relativa contra `protocol://zone/api/v{version}`;
3. serializa el cuerpo a JSON si no viene ya en texto;
4. añade la query;
5. llama al transporte inyectado;
6. status >= 400 -> `MakeError` normalizado; si no, JSON o texto según
   `content-type`.

No hay reintentos, timeouts ni colas: eso es política del transporte o del
llamador.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from make_sdk.core.domain.errors import ErrorBody, MakeError, SubError
from make_sdk.core.interfaces.transport import FetchOptions, Transport, TransportResponse
from make_sdk.core.services.query import build_url
from make_sdk.version import VERSION

logger = logging.getLogger(__name__)

USER_AGENT = f"MakePythonSDK/{VERSION}"

_API_KEY_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)


def is_api_key(token: str) -> bool:
    """Las API keys de Make tienen forma de UUID; el resto son tokens OAuth."""

    return bool(_API_KEY_RE.match(token))


def serialize_body(body: Any) -> str:
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


async def create_make_error(response: TransportResponse) -> MakeError:
    """Construye el `MakeError` de una respuesta fallida. Nunca lanza.

    - `detail` (si es texto) tiene prioridad sobre `message`.
    - Cada sub-error bien formado añade una línea `"\\n - {message}"`.
    - Si el cuerpo no es JSON o no tiene `message`, se usa el reason phrase.
    """

    try:
        body = ErrorBody.model_validate(await response.json())
    except Exception as exc:
        logger.debug("Unparseable error body (HTTP %s): %s", response.status_code, exc)
        return MakeError(response.reason_phrase, response.status_code)

    message = body.detail if isinstance(body.detail, str) else body.message
    sub_errors: list[str] = []
    if isinstance(body.suberrors, list):
        for item in body.suberrors:
            try:
                sub_errors.append(SubError.model_validate(item).message)
            except ValidationError:
                continue
    for sub_message in sub_errors:
        message += f"\n - {sub_message}"

    return MakeError(message, response.status_code, sub_errors)


class RequestDispatcher:
    """Pipeline compartido de petición/respuesta.

    Configuración inmutable tras la construcción (token, zona, versión),
    salvo `protocol`, que se puede cambiar (p.ej. a `http` en local).
    """

    def __init__(
        self,
        token: str,
        zone: str,
        version: int = 2,
        *,
        transport: Transport,
        protocol: str = "https",
    ) -> None:
        self.__token = token
        self._zone = zone
        self._version = version
        self._transport = transport
        self.protocol = protocol

    @property
    def zone(self) -> str:
        return self._zone

    @property
    def version(self) -> int:
        return self._version

    @property
    def transport(self) -> Transport:
        return self._transport

    def _default_headers(self) -> dict[str, str]:
        scheme = "Token" if is_api_key(self.__token) else "Bearer"
        return {
            "user-agent": USER_AGENT,
            "authorization": f"{scheme} {self.__token}",
        }

    def resolve_url(self, path: str) -> str:
        if path.startswith("//"):
            return f"{self.protocol}:{path}"
        if path.startswith("/"):
            return f"{self.protocol}://{self._zone}/api/v{self._version}{path}"
        return path

    async def fetch(self, path: str, options: FetchOptions | None = None) -> Any:
        """Ejecuta una llamada y devuelve el JSON decodificado o el texto.

        Raises:
            MakeError: si la API responde con status >= 400.
        """

        options = options or {}
        method = options.get("method") or "GET"

        caller_headers: Mapping[str, str] = options.get("headers") or {}
        headers = {name.lower(): value for name, value in caller_headers.items()}
        headers.update(self._default_headers())

        url = self.resolve_url(path)

        body = options.get("body")
        if body is not None and not isinstance(body, (str, bytes)):
            body = serialize_body(body)
            headers["content-type"] = "application/json"

        query = options.get("query")
        if query:
            url = build_url(url, query)

        logger.debug("%s %s", method, url)
        response = await self._transport(url, method=method, headers=headers, body=body)
        logger.debug("%s %s -> %s", method, url, response.status_code)

        if response.status_code >= 400:
            raise await create_make_error(response)

        content_type = response.headers.get("content-type") or ""
        if "application/json" in content_type:
            return await response.json()
        return await response.text()
