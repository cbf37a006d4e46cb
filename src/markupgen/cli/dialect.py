"""Dialect catalog CLI commands."""

import argparse

import yaml


def cmd_dialect_list(args: argparse.Namespace) -> int:
    from markupgen.dialects.catalog import all_dialects
    from markupgen.paths import base_package
    from markupgen.writer import module_name

    package = args.package or base_package()
    dialects = all_dialects()

    print(f"\n  {'Key':<22} {'Module':<30} {'Elements':>8} {'Attrs':>6}  Void style")
    print(f"  {'─' * 80}")
    for d in dialects:
        style = "<br />" if d.self_closing else "<br>"
        print(
            f"  {d.key:<22} {module_name(d, package):<30} "
            f"{len(d.elements):>8} {len(d.attributes):>6}  {style}"
        )
    print(f"\n  {len(dialects)} dialect(s)")
    return 0


def cmd_dialect_show(args: argparse.Namespace) -> int:
    from markupgen.dialects.catalog import dialect_map, find_dialect

    dialect = find_dialect(args.key)
    if dialect is None:
        print(f"ERROR: Dialect '{args.key}' not found (known: {', '.join(dialect_map())})")
        return 1

    print(yaml.safe_dump(dialect.to_dict(), sort_keys=False, default_flow_style=False), end="")
    return 0
