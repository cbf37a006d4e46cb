"""Command-line interface for the markup combinator generator.

Usage:
    markupgen generate [--dialect KEY ...] [--dry-run]
    markupgen check
    markupgen dialect list
    markupgen dialect show <key>

Global options (before the command):
    --dest DIR            destination tree (env MARKUPGEN_OUTPUT_DIR)
    --runtime-module MOD  module generated code imports from
                          (env MARKUPGEN_RUNTIME_MODULE)
    --package PKG         dotted package of the destination tree
                          (env MARKUPGEN_PACKAGE)
"""

import argparse
import sys

from markupgen import __version__
from markupgen.cli.dialect import cmd_dialect_list, cmd_dialect_show
from markupgen.cli.generate import cmd_check, cmd_generate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markupgen",
        description="Generate Python markup combinator modules for every HTML dialect",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--dest", default=None,
        help="Destination directory (default: $MARKUPGEN_OUTPUT_DIR or src/markup)",
    )
    parser.add_argument(
        "--runtime-module", default=None,
        help="Module providing the rendering primitives (default: markup.internal)",
    )
    parser.add_argument(
        "--package", default=None,
        help="Dotted package name of the destination tree (default: markup)",
    )
    sub = parser.add_subparsers(dest="command")

    # generate
    gen = sub.add_parser("generate", help="Generate element and attribute modules")
    gen.add_argument(
        "--dialect", action="append", default=None,
        help="Only generate this dialect key (repeatable)",
    )
    gen.add_argument(
        "--dry-run", action="store_true",
        help="Render everything without writing files",
    )

    # check
    sub.add_parser("check", help="Run collision checks over the whole catalog")

    # dialect
    dia = sub.add_parser("dialect", help="Dialect catalog operations")
    dia_sub = dia.add_subparsers(dest="subcommand")
    dia_sub.add_parser("list", help="List cataloged dialects")
    show = dia_sub.add_parser("show", help="Dump a dialect as YAML")
    show.add_argument("key", help="Dialect key, e.g. html4-strict")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("dialect", "list"): cmd_dialect_list,
        ("dialect", "show"): cmd_dialect_show,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "generate":
        return cmd_generate(args)
    if args.command == "check":
        return cmd_check(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
