"""Main CLI application module."""

import typer

from cloudflare_entities.runtime.logging import setup_logging

from .entity_commands import entity_app

app = typer.Typer(
    help="🛠️  Account API entity tooling",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(entity_app, name="entity")


@app.callback()
def configure() -> None:
    """Configure logging before any command runs."""
    setup_logging()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
