"""make-sdk: cliente Python para la API de Make.

Capas:
- core: dominio, contratos y pipeline de petición/respuesta
- adapters: transporte httpx y endpoints por recurso
- cli: comandos de diagnóstico y llamadas directas
"""

from make_sdk.client import Make
from make_sdk.core.domain.errors import MakeError
from make_sdk.core.interfaces.transport import FetchOptions, Transport, TransportResponse
from make_sdk.core.services.query import build_url
from make_sdk.version import VERSION

__version__ = VERSION
__all__ = [
    "FetchOptions",
    "Make",
    "MakeError",
    "Transport",
    "TransportResponse",
    "build_url",
]
