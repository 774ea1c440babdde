"""Construcción del cliente para los comandos de la CLI."""

from __future__ import annotations

from make_sdk.client import Make
from make_sdk.core.config import MakeSettings


def build_client(settings: MakeSettings | None = None) -> Make:
    return Make.from_settings(settings)
