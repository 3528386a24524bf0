"""Rich output helpers for the command line."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from pathlib import Path

    from storage_kit.types import DirEntry


def configure_logging(verbose: bool = False) -> None:
    """Route storage_kit log records to stderr through Rich.

    Args:
        verbose: Show DEBUG records instead of WARNING and above.
    """
    logger = logging.getLogger("storage_kit")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_time=False, show_path=verbose)
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def printable(text: str) -> str:
    """Replace lone surrogates (undecodable filename bytes) with escapes."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class StorageConsole:
    """Text output for storage-kit commands (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Display success message."""
        self.console.print(f"[green]✓[/green] {escape(printable(message))}")

    def show_error(self, message: str) -> None:
        """Display error message."""
        self.console.print(f"[red]✗[/red] {escape(printable(message))}")

    def show_warning(self, message: str) -> None:
        """Display warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(printable(message))}")

    def show_text(self, content: str) -> None:
        """Print file content verbatim, without markup or highlighting."""
        self.console.out(content, end="", highlight=False)

    def show_line(self, text: str) -> None:
        """Print one plain line, such as a generated path."""
        self.console.out(printable(text), highlight=False)

    def show_entries(self, root: Path, entries: list[DirEntry]) -> None:
        """Display a directory listing as a tree.

        Args:
            root: Directory that was listed.
            entries: Entries returned by DirOps.list.
        """
        if not entries:
            self.show_warning(f"{root} is empty")
            return

        tree = Tree(Text(printable(str(root)), style="bold"))
        self._add_entries(tree, entries)
        self.console.print(tree)

    def _add_entries(self, node: Tree, entries: list[DirEntry]) -> None:
        for entry in entries:
            if entry.is_file:
                node.add(Text(printable(entry.name_with_extension or entry.name)))
                continue
            branch = node.add(Text(printable(f"{entry.name}/"), style="bold blue"))
            if entry.children:
                self._add_entries(branch, entry.children)

    def show_json(self, entries: list[DirEntry]) -> None:
        """Print a listing as JSON with camelCase keys."""
        payload = [entry.to_dict() for entry in entries]
        self.console.out(json.dumps(payload, indent=2), highlight=False)
