"""ds-catalog CLI (typer).

Commands:
- `characters` / `combat-styles`: aggregate a whole collection and print it.
- `character`: look up one character by `--id` or `--name`.
- `serve`: run the HTTP API with uvicorn.
- `doctor`: configuration and connectivity checks.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import (
    build_character_panel,
    build_characters_table,
    build_combat_styles_table,
    print_error,
)
from core.config import AppSettings, get_settings
from core.domain.errors import CatalogApiError
from core.logging import configure_logging
from core.services.catalog_service import CatalogService, build_catalog_service
from core.services.sorting import sort_by_name

app = typer.Typer(no_args_is_help=True, help="Aggregated, read-only view of the Demon Slayer API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [item.model_dump(mode="json", by_alias=True) for item in value]
    return value.model_dump(mode="json", by_alias=True)


def _execute(operation: Callable[[CatalogService], Awaitable[Any]]) -> Any:
    """Run one service call, turning a `CatalogApiError` into exit code 1."""

    async def runner() -> Any:
        async with build_catalog_service(get_settings()) as service:
            return await operation(service)

    try:
        return asyncio.run(runner())
    except CatalogApiError as exc:
        print_error(_console, exc)
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    settings: AppSettings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def characters(
    sort: str = typer.Option("id", "--sort", help="Order by 'id' or 'name'."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List every character, fetching all pages."""

    if sort not in ("id", "name"):
        raise typer.BadParameter("sort must be 'id' or 'name'", param_hint="--sort")

    result = _execute(lambda service: service.list_characters())
    if sort == "name":
        result = sort_by_name(result)

    if json_output:
        _console.print_json(data=_dump(result))
    else:
        _console.print(build_characters_table(result))


@app.command(name="combat-styles")
def combat_styles(
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List every combat style, fetching all pages."""

    result = _execute(lambda service: service.list_combat_styles())
    if json_output:
        _console.print_json(data=_dump(result))
    else:
        _console.print(build_combat_styles_table(result))


@app.command()
def character(
    id: Optional[int] = typer.Option(None, "--id", help="Upstream character id."),
    name: Optional[str] = typer.Option(None, "--name", help="Exact character name."),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a panel."),
) -> None:
    """Look up a single character by id (preferred) or name."""

    result = _execute(lambda service: service.find_character(id=id, name=name))
    if json_output:
        _console.print_json(data=_dump(result))
    else:
        _console.print(build_character_panel(result))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (default from settings)."),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port (default from settings)."),
) -> None:
    """Run the HTTP API."""

    import uvicorn  # noqa: PLC0415

    from api.app import create_app  # noqa: PLC0415

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_config=None,
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
