"""Shared CLI helpers."""

from typing import Optional

from rich.console import Console

console = Console()


def parse_languages(value: Optional[str]) -> Optional[tuple[str, ...]]:
    """Split a comma-separated allow-list. Blank entries are dropped."""
    if not value:
        return None
    languages = tuple(part.strip() for part in value.split(",") if part.strip())
    return languages or None
