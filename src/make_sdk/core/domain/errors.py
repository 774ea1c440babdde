"""Errores del dominio.

`MakeError` es el único error que la librería produce por respuestas HTTP
fallidas (status >= 400). Los errores de red del transporte se propagan tal
cual: no se envuelven ni se clasifican aquí.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr


class MakeError(Exception):
    """Error estructurado devuelto por la API de Make.

    - `message`: texto legible (puede ser multilínea con sub-errores).
    - `status_code`: código HTTP de origen, si lo hay.
    - `sub_errors`: mensajes individuales de `suberrors`, en orden.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        sub_errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.sub_errors = sub_errors or []

    def __repr__(self) -> str:
        return f"MakeError({self.message!r}, status_code={self.status_code!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""

        result: dict[str, Any] = {"error": self.message}
        if self.status_code is not None:
            result["status"] = self.status_code
        if self.sub_errors:
            result["suberrors"] = list(self.sub_errors)
        return result


class SubError(BaseModel):
    """Elemento bien formado de `suberrors`."""

    model_config = ConfigDict(extra="ignore")

    message: StrictStr


class ErrorBody(BaseModel):
    """Cuerpo JSON de error tal como lo devuelve la API.

    Solo `message` es obligatorio. `detail` y `suberrors` se aceptan con
    cualquier forma: el normalizador decide qué usar de ellos.
    """

    model_config = ConfigDict(extra="ignore")

    message: StrictStr
    detail: Any = None
    suberrors: Any = None
