"""Command: gdasset resolve - resolve an ExtResource/SubResource id."""

from __future__ import annotations

import argparse

from rich.markup import escape

from gdasset.commands import console, load_document
from gdasset.exceptions import GDAssetError
from gdasset.queries import AssetQueries
from gdasset.references import EXT_RESOURCE, KEYWORDS, SUB_RESOURCE
from gdasset.values import load_code


def run(args: argparse.Namespace) -> None:
    document = load_document(args.file)
    queries = AssetQueries()

    try:
        ref = queries.resolve_reference(document, args.keyword, args.id)
    except GDAssetError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not ref.resolved:
        console.print(f"[yellow]Unresolved:[/yellow] {ref.keyword}({escape(ref.id)})")
        raise SystemExit(1)

    resource = ref.resource
    console.print(f"[bold]{ref.keyword}[/bold]({escape(ref.id)})")
    console.print(f"  path: [cyan]{escape(resource.path)}[/cyan]")
    console.print(f"  type: {escape(resource.type) or '-'}")
    if resource.symbol is not None:
        console.print(f"  line: {resource.symbol.range.start.line + 1}")

    if ref.keyword == SUB_RESOURCE:
        own_path, _, sub_id = resource.path.rpartition("::")
        code = load_code(own_path, sub_id, resource.type)
    else:
        code = load_code(resource.path, None, resource.type)
    console.print(f"  code: [green]{escape(code)}[/green]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "resolve",
        help="Resolve an ExtResource/SubResource id.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""
Resolve a resource id against the tables of a document.

Examples:
  gdasset resolve main.tscn {EXT_RESOURCE} 1_x4k2p
  gdasset resolve main.tscn {SUB_RESOURCE} 3
        """,
    )
    p.add_argument("file", metavar="FILE", help="Path to the asset document.")
    p.add_argument("keyword", choices=KEYWORDS, help="Reference keyword.")
    p.add_argument("id", help='Resource id (digits, text, or a quoted "id").')
    p.set_defaults(func=run)
