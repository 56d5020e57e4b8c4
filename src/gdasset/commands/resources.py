"""Command: gdasset resources - list the resource tables of a document."""

from __future__ import annotations

import argparse

from rich import box
from rich.markup import escape
from rich.table import Table

from gdasset.commands import console, load_document
from gdasset.references import EXT_RESOURCE, SUB_RESOURCE
from gdasset.queries import AssetQueries


def run(args: argparse.Namespace) -> None:
    document = load_document(args.file)
    queries = AssetQueries()

    if args.path:
        rows = [(ref.keyword, ref.id, ref.resource) for ref in queries.references_to(document, args.path)]
    else:
        ext_resources, sub_resources = queries.resource_tables(document)
        rows = [(EXT_RESOURCE, rid, res) for rid, res in ext_resources.items()]
        rows += [(SUB_RESOURCE, rid, res) for rid, res in sub_resources.items()]

    if not rows:
        console.print("[yellow]No resources found.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("TABLE", no_wrap=True, style="dim")
    table.add_column("ID",    no_wrap=True, style="bold cyan")
    table.add_column("TYPE",  no_wrap=True)
    table.add_column("PATH",  no_wrap=False, max_width=70)
    table.add_column("LINE",  justify="right", no_wrap=True)

    for keyword, resource_id, resource in rows:
        line = str(resource.symbol.range.start.line + 1) if resource.symbol else "-"
        table.add_row(keyword, escape(resource_id), escape(resource.type) or "-", escape(resource.path), line)

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(rows)} resources[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "resources",
        help="List the external and local resource tables.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
List resources declared by ext_resource and sub_resource sections.

Examples:
  gdasset resources main.tscn
  gdasset resources main.tscn --path res://icon.svg
        """,
    )
    p.add_argument("file", metavar="FILE", help="Path to the asset document.")
    p.add_argument(
        "--path", "-p",
        metavar="RES_PATH",
        default=None,
        help="Only list ids whose resource has this path.",
    )
    p.set_defaults(func=run)
