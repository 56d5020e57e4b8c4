"""Command line front-end for gdasset.

Usage:
  gdasset <command> [options]

Commands:
  outline     Print the symbol tree of an asset document.
  resources   List the external and local resource tables.
  resolve     Resolve an ExtResource/SubResource id.
  colors      List the colors written in an asset document.
"""

from __future__ import annotations

import argparse
import logging
import os

from rich.logging import RichHandler

from gdasset import __version__
from gdasset.commands import colors as cmd_colors
from gdasset.commands import outline as cmd_outline
from gdasset.commands import resolve as cmd_resolve
from gdasset.commands import resources as cmd_resources

LOG_LEVEL_ENV = "GDASSET_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Install a rich log handler.

    The level comes from ``--verbose`` (DEBUG), else the GDASSET_LOG_LEVEL
    environment variable, else WARNING.
    """
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdasset",
        description="Inspect Godot text asset documents (.tscn, .tres, .godot).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"gdasset {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    cmd_outline.add_parser(subparsers)
    cmd_resources.add_parser(subparsers)
    cmd_resolve.add_parser(subparsers)
    cmd_colors.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
