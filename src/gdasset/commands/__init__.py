"""Subcommands of the gdasset CLI."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from gdasset.document import TextDocument

console = Console()


def load_document(path: str) -> TextDocument:
    """Read a document for a command, exiting with status 1 if it is missing."""
    try:
        return TextDocument.from_path(Path(path))
    except FileNotFoundError as e:
        console.print(f"[red]File not found:[/red] {e}")
        raise SystemExit(1)
    except UnicodeDecodeError as e:
        console.print(f"[red]Not a UTF-8 text file:[/red] {path} ({e})")
        raise SystemExit(1)
