"""Command: gdasset colors - list the colors written in a document."""

from __future__ import annotations

import argparse

from rich import box
from rich.markup import escape
from rich.table import Table

from gdasset.commands import console, load_document
from gdasset.queries import AssetQueries
from gdasset.values import color_args, color_label


def _swatch(label: str) -> str:
    if not label.startswith("#"):
        return ""
    return f"[on {label[:7]}]    [/on {label[:7]}]"


def run(args: argparse.Namespace) -> None:
    document = load_document(args.file)
    colors = AssetQueries().colors(document)

    if not colors:
        console.print("[yellow]No colors found.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("LINE", justify="right", no_wrap=True, style="dim")
    table.add_column("COLOR", no_wrap=True, style="bold")
    table.add_column("", no_wrap=True)
    table.add_column("ARGS", no_wrap=True)

    for color in colors:
        start = color.span.start
        label = color_label(*color.rgba)
        table.add_row(
            f"{start.line + 1}:{start.column + 1}",
            escape(label),
            _swatch(label),
            escape(color_args(*color.rgba)),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(colors)} colors[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "colors",
        help="List the colors written in an asset document.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
List Color(...) values and PackedColorArray items outside strings and comments.

Examples:
  gdasset colors theme.tres
        """,
    )
    p.add_argument("file", metavar="FILE", help="Path to the asset document.")
    p.set_defaults(func=run)
