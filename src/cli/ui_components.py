"""Rich components for the CLI.

Kept apart from the commands so tables and panels can be reused.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import CatalogApiError
from core.domain.models import Character, CharacterSummary, CombatStyle


def _short(value: str | None, limit: int = 80) -> str:
    if not value:
        return ""
    value = " ".join(value.split())
    return value if len(value) <= limit else value[: limit - 1] + "…"


def build_characters_table(characters: Iterable[CharacterSummary]) -> Table:
    table = Table(title="Characters")
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Gender", style="green")
    table.add_column("Race", style="magenta")
    table.add_column("Description", style="dim")
    for c in characters:
        table.add_row(str(c.id), c.name or "", c.gender or "", c.race or "", _short(c.description))
    return table


def build_combat_styles_table(styles: Iterable[CombatStyle]) -> Table:
    table = Table(title="Combat Styles")
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")
    for s in styles:
        table.add_row(str(s.id), s.name or "", _short(s.description))
    return table


def build_character_panel(character: Character) -> Panel:
    """Detailed view of a single character."""

    body = Text()
    body.append(f"{character.name or '?'}\n", style="bold")
    body.append(f"{character.gender or '-'} • {character.race or '-'}\n\n", style="dim")
    if character.description:
        body.append(character.description.strip() + "\n\n")
    if character.affiliation and character.affiliation.name:
        body.append("Affiliation: ", style="bold")
        body.append(character.affiliation.name + "\n")
    if character.combat_styles:
        body.append("Combat styles:\n", style="bold")
        for style in character.combat_styles:
            body.append(f"- {style.name or style.id}\n")

    title = Text(f"Character #{character.id}", style="bold yellow")
    return Panel(body, title=title, border_style="yellow")


def print_error(console: Console, error: CatalogApiError) -> None:
    console.print(f"[red][{error.status_code}] {escape(error.message)}[/red]")
