"""Componentes de UI para CLI (Rich).

Mantiene los detalles visuales fuera de los comandos para reutilizar
tablas y paneles.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from make_sdk.core.domain.errors import MakeError
from make_sdk.core.domain.models import User


def build_doctor_table() -> Table:
    table = Table(title="make-sdk doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def build_user_panel(user: User) -> Panel:
    """Panel con el usuario autenticado."""

    body = Text()
    body.append(f"{user.name or '-'}", style="bold")
    if user.email:
        body.append(f" <{user.email}>")
    body.append(f"\nID: {user.id}")
    if user.timezone:
        body.append(f"\nTimezone: {user.timezone}", style="dim")
    if user.locale:
        body.append(f"\nLocale: {user.locale}", style="dim")
    return Panel(body, title=Text("Make user", style="bold cyan"), border_style="cyan")


def print_result(console: Console, result: Any) -> None:
    """Imprime el resultado de una llamada: JSON bonito o texto tal cual."""

    if isinstance(result, str):
        console.print(result, markup=False, highlight=False)
        return
    console.print_json(json.dumps(result, default=str))


def print_error(console: Console, error: MakeError) -> None:
    console.print_json(json.dumps(error.to_dict()))
