"""CLI console helpers with optional Rich support.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``,
``doctor``) keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from crystallize_setup.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def load_rich_table() -> type[Any]:
    """Return ``rich.table.Table`` or raise ``MissingDependencyError``."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def escape_markup(text: str) -> str:
    """Escape Rich markup in user data; identity when Rich is absent."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain stderr fallback."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def notify(self, message: str) -> None:
        """Print an informational line; used as the core ``notify`` hook."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(message, file=sys.stderr)
            return
        rich_console.print(f"[dim]{escape_markup(message)}[/dim]")


console = _ConsoleProxy()
