"""Shared CLI helpers."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from cloudflare_entities.entities import ENTITY_TYPES, Entity

console = Console()
err_console = Console(stderr=True)


def resolve_entity(name: str) -> type[Entity]:
    """Look up an entity class by its public name, exiting on unknown names."""
    try:
        return ENTITY_TYPES[name]
    except KeyError:
        choices = ", ".join(sorted(ENTITY_TYPES))
        err_console.print(f"[red]❌ Unknown entity '{escape(name)}'. Choose one of: {choices}[/red]")
        raise typer.Exit(code=2) from None


def read_document(path: Path) -> str:
    """Read a JSON document from disk, exiting if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]❌ Cannot read {path}: {e}[/red]")
        raise typer.Exit(code=1) from e
