"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console

from make_sdk.cli import session
from make_sdk.cli.ui_components import build_doctor_table
from make_sdk.core.config import MakeSettings, get_user_env_file, write_user_env_vars
from make_sdk.core.domain.errors import MakeError

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics and setup.")

_console = Console()


async def _check_api(settings: MakeSettings) -> tuple[bool, str]:
    try:
        async with session.build_client(settings) as make:
            user = await make.users.me()
        return True, f"Authenticated as {user.email or user.name or user.id}"
    except MakeError as exc:
        status = f"HTTP {exc.status_code}: " if exc.status_code else ""
        return False, f"{status}{exc.message}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Check configuration and API connectivity."""

    settings = MakeSettings()

    table = build_doctor_table()
    table.add_row("Config file", "INFO", str(get_user_env_file()))
    table.add_row("API key", "OK" if settings.api_key else "MISSING", "MAKE_API_KEY")
    table.add_row("Zone", "OK" if settings.zone else "MISSING", settings.zone or "MAKE_ZONE")
    table.add_row("API version", "OK", f"v{settings.api_version}")
    table.add_row("Protocol", "OK", settings.protocol)

    ok = False
    if settings.api_key and settings.zone:
        ok, detail = asyncio.run(_check_api(settings))
        table.add_row("API", "OK" if ok else "FAIL", detail)
    else:
        table.add_row("API", "SKIPPED", "Set MAKE_API_KEY and MAKE_ZONE first")

    _console.print(table)

    if not ok:
        _console.print("\n[yellow]Hint:[/yellow] run `make-sdk doctor configure` to store credentials.")
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    zone = typer.prompt("Make zone (e.g. eu1.make.com)").strip()
    api_key = typer.prompt("API key", hide_input=True).strip()

    if not zone or not api_key:
        raise typer.BadParameter("zone and API key are required")

    env_path = write_user_env_vars({"MAKE_ZONE": zone, "MAKE_API_KEY": api_key})
    _console.print(f"[green]Saved config to:[/green] {env_path}")
