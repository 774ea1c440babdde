"""Configuración del cliente.

Centraliza variables de entorno (pydantic-settings) para la CLI y para
`Make.from_settings`. El cliente también se puede construir a mano sin
pasar por aquí.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import typer
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (`typer.get_app_dir`, respeta XDG)."""

    return Path(typer.get_app_dir("make-sdk"))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: Mapping[str, str | None]) -> Path:
    """Actualiza claves en el .env global del usuario.

    Las líneas existentes (comentarios incluidos) se conservan en su sitio;
    una clave ya presente se reescribe en su línea y las nuevas se añaden al
    final. Las claves con valor `None` no se tocan.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    pending = {key: value for key, value in values.items() if value is not None}
    lines = env_path.read_text(encoding="utf-8").splitlines() if env_path.exists() else []

    for index, line in enumerate(lines):
        if line.lstrip().startswith("#") or "=" not in line:
            continue
        key = line.split("=", 1)[0].strip()
        if key in pending:
            lines[index] = f"{key}={pending.pop(key)}"

    lines.extend(f"{key}={value}" for key, value in pending.items())
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class MakeSettings(BaseSettings):
    """Configuración central del cliente de Make."""

    model_config = SettingsConfigDict(
        env_prefix="MAKE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="API key de Make o access token OAuth2.",
    )
    zone: str | None = Field(
        default=None,
        min_length=1,
        description="Zona de Make (p.ej. 'eu1.make.com').",
    )
    api_version: int = Field(
        default=2,
        gt=0,
        description="Versión de la API.",
    )
    protocol: str = Field(
        default="https",
        min_length=1,
        description="Protocolo; 'http' solo para entornos locales.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos) del transporte httpx.",
    )
