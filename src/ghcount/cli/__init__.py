"""CLI entry point."""

import typer
from dotenv import load_dotenv

app = typer.Typer(
    name="ghcount",
    help="ghcount - production vs test line counts across GitHub repositories",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .count import count as _count  # noqa: F401, E402


def main() -> None:
    """Console script: read ``.env`` into the environment, then run the app."""
    load_dotenv()
    app()
