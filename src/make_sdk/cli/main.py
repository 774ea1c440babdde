"""CLI principal (`make-sdk`).

Comandos:
- `whoami`: usuario autenticado.
- `request`: llamada directa a cualquier ruta de la API.
- `doctor run` / `doctor configure`: diagnóstico y configuración.

Los errores de la API se imprimen como JSON y terminan con código 1.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Optional

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

from make_sdk.cli import doctor, session
from make_sdk.cli.ui_components import build_user_panel, print_error, print_result
from make_sdk.core.domain.errors import MakeError
from make_sdk.core.domain.models import User
from make_sdk.version import VERSION

app = typer.Typer(no_args_is_help=True, help="Command-line access to the Make API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"make-sdk {VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=_err_console, show_path=False)],
        )


def parse_query(pairs: list[str]) -> dict[str, Any]:
    """`key=value` -> dict; una clave repetida se convierte en lista."""

    query: dict[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--query")
        key, value = pair.split("=", 1)
        if key in query:
            previous = query[key]
            query[key] = [*previous, value] if isinstance(previous, list) else [previous, value]
        else:
            query[key] = value
    return query


def _run(coro: Any) -> Any:
    try:
        return asyncio.run(coro)
    except MakeError as exc:
        print_error(_console, exc)
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        print_error(_console, MakeError(f"Connection error: {exc}"))
        raise typer.Exit(code=1) from exc


async def _whoami() -> User:
    async with session.build_client() as make:
        return await make.users.me()


@app.command()
def whoami() -> None:
    """Show the authenticated user."""

    user = _run(_whoami())
    _console.print(build_user_panel(user))


async def _request(path: str, method: str, query: dict[str, Any], body: Any) -> Any:
    async with session.build_client() as make:
        return await make.fetch(path, {"method": method, "query": query, "body": body})


@app.command()
def request(
    path: str = typer.Argument(..., help="API path, e.g. /users/me (relative to /api/v{version})."),
    method: str = typer.Option("GET", "--method", "-X", help="HTTP method."),
    query: Optional[list[str]] = typer.Option(None, "--query", "-q", help="Query parameter key=value (repeatable)."),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON request body."),
) -> None:
    """Send a raw request and print the response."""

    body: Any = None
    if data is not None:
        try:
            body = json.loads(data)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"invalid JSON: {exc}", param_hint="--data") from exc

    result = _run(_request(path, method.upper(), parse_query(query or []), body))
    print_result(_console, result)


def run() -> None:
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()
