"""Entity inspection CLI commands."""

import json
from pathlib import Path

import typer
from loguru import logger
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from cloudflare_entities.core.diff import diff_entities
from cloudflare_entities.core.exceptions import EntityError
from cloudflare_entities.entities import Entity

from .utils import console, err_console, read_document, resolve_entity

entity_app = typer.Typer(help="🎭 Entity inspection commands")


def _fail(path: Path, error: EntityError) -> typer.Exit:
    logger.debug(f"{path}: {error!r}")
    err_console.print(f"[red]❌ {escape(str(path))}: {escape(str(error))}[/red]")
    return typer.Exit(code=1)


@entity_app.command("fields")
def show_fields(
    name: str = typer.Argument(..., help="Entity name, e.g. user or billing-profile"),
) -> None:
    """Show an entity's field map."""
    entity_cls = resolve_entity(name)

    table = Table(title=f"{entity_cls.__name__} field map")
    table.add_column("Wire key", style="cyan")
    table.add_column("Field", style="green")
    table.add_column("Codec", style="magenta")
    for field in entity_cls.field_map:
        table.add_row(field.wire_key, field.field_name, repr(field.codec))

    console.print(table)


@entity_app.command("check")
def check_document(
    name: str = typer.Argument(..., help="Entity name"),
    path: Path = typer.Argument(..., help="JSON file holding an object or an array of objects"),
    strict: bool | None = typer.Option(
        None, "--strict/--lenient", help="Reject wire keys that are not mapped"
    ),
) -> None:
    """Hydrate a JSON document and print its normalized serialization."""
    entity_cls = resolve_entity(name)
    document = read_document(path)
    is_list = document.lstrip().startswith("[")

    try:
        if is_list:
            entities: list[Entity] = list(entity_cls.hydrate_many(document, strict=strict))
        else:
            entities = [entity_cls.hydrate(document, strict=strict)]
        wire = [entity.serialize() for entity in entities]
    except EntityError as e:
        raise _fail(path, e) from e

    payload = wire if is_list else wire[0]
    console.print(Syntax(json.dumps(payload, indent=2), "json"))
    console.print(f"[green]✅ {len(entities)} {entity_cls.__name__} document(s) OK[/green]")


@entity_app.command("diff")
def diff_documents(
    name: str = typer.Argument(..., help="Entity name"),
    left: Path = typer.Argument(..., help="Left JSON object document"),
    right: Path = typer.Argument(..., help="Right JSON object document"),
) -> None:
    """Show the fields that differ between two documents of the same entity."""
    entity_cls = resolve_entity(name)
    try:
        left_entity = entity_cls.hydrate(read_document(left))
    except EntityError as e:
        raise _fail(left, e) from e
    try:
        right_entity = entity_cls.hydrate(read_document(right))
    except EntityError as e:
        raise _fail(right, e) from e

    try:
        changes = diff_entities(left_entity, right_entity)
    except EntityError as e:
        raise _fail(left, e) from e

    if not changes:
        console.print("[green]No differences[/green]")
        return

    table = Table(title=f"{entity_cls.__name__}: {left.name} → {right.name}")
    table.add_column("Wire key", style="cyan")
    table.add_column(left.name, style="red")
    table.add_column(right.name, style="green")
    for change in changes:
        table.add_row(change.wire_key, json.dumps(change.left), json.dumps(change.right))

    console.print(table)
