"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_endpoint(settings: AppSettings, endpoint: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(endpoint, params={"page": 1, "limit": 1})
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Show the effective configuration and check the upstream endpoints."""

    settings = AppSettings()

    table = Table(title="ds-catalog Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    failed = False
    for label, endpoint in (
        ("Characters endpoint", settings.character_endpoint),
        ("Combat styles endpoint", settings.combat_style_endpoint),
    ):
        ok, detail = asyncio.run(_check_endpoint(settings, endpoint))
        failed = failed or not ok
        table.add_row(label, "OK" if ok else "FAIL", f"{endpoint} -> {detail}")

    _console.print(table)

    if failed:
        _console.print(
            "\n[yellow]Note:[/yellow] check DS_CATALOG_BASE_URL and the endpoint paths in your .env."
        )
        raise typer.Exit(code=1)
