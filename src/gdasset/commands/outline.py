"""Command: gdasset outline - print the symbol tree of a document."""

from __future__ import annotations

import argparse

from rich.markup import escape
from rich.tree import Tree

from gdasset.commands import console, load_document
from gdasset.models import Symbol, SymbolKind
from gdasset.queries import AssetQueries

KIND_STYLE: dict[SymbolKind, str] = {
    SymbolKind.FILE:     "bold magenta",
    SymbolKind.NAMESPACE: "bold white",
    SymbolKind.OBJECT:   "cyan",
    SymbolKind.VARIABLE: "green",
    SymbolKind.EVENT:    "yellow",
    SymbolKind.BOOLEAN:  "yellow",
    SymbolKind.ARRAY:    "blue",
    SymbolKind.PROPERTY: "",
}


def _label(symbol: Symbol, show_ranges: bool) -> str:
    style = KIND_STYLE.get(symbol.kind, "")
    name = escape(symbol.name)
    label = f"[{style}]{name}[/{style}]" if style else name
    if symbol.detail:
        label += f"  [dim]{escape(symbol.detail)}[/dim]"
    if show_ranges:
        start, end = symbol.range.start, symbol.range.end
        label += f"  [dim]{start.line + 1}:{start.column + 1}-{end.line + 1}:{end.column + 1}[/dim]"
    return label


def _add_children(tree: Tree, symbols: list[Symbol], depth: int | None, show_ranges: bool) -> None:
    if depth is not None and depth <= 0:
        return
    for symbol in symbols:
        branch = tree.add(_label(symbol, show_ranges))
        _add_children(branch, symbol.children, None if depth is None else depth - 1, show_ranges)


def run(args: argparse.Namespace) -> None:
    document = load_document(args.file)
    state = AssetQueries().parse(document)

    tree = Tree(f"[bold]{escape(args.file)}[/bold]")
    _add_children(tree, state.symbols, args.depth, args.ranges)
    console.print(tree)
    console.print(
        f"  [dim]{len(state.symbols)} sections, {len(state.strings)} strings, "
        f"{len(state.comments)} comments[/dim]"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "outline",
        help="Print the symbol tree of an asset document.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Print sections, properties and array groups of a Godot asset document.

Examples:
  gdasset outline main.tscn
  gdasset outline theme.tres --depth 1
  gdasset outline project.godot --ranges
        """,
    )
    p.add_argument("file", metavar="FILE", help="Path to the asset document.")
    p.add_argument(
        "--depth", "-d",
        type=int,
        default=None,
        metavar="N",
        help="Only show N levels of symbols.",
    )
    p.add_argument(
        "--ranges",
        action="store_true",
        help="Show the 1-based line:column range of each symbol.",
    )
    p.set_defaults(func=run)
