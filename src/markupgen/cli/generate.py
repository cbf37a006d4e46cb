"""Generation and check CLI commands."""

import argparse


def cmd_generate(args: argparse.Namespace) -> int:
    from markupgen.collisions import ConfigurationError
    from markupgen.driver import generate_all

    prefix = "[DRY RUN] " if args.dry_run else ""
    try:
        result = generate_all(
            dest=args.dest,
            runtime_module=args.runtime_module,
            only=args.dialect,
            dry_run=args.dry_run,
            on_write=lambda path: print(f"{prefix}Generating {path}"),
        )
    except ConfigurationError as e:
        print(f"ERROR: configuration error\n{e}")
        return 1
    except OSError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"\n  {len(result['generated'])} dialect(s) -> {result['dest']}")
    if result["dry_run"]:
        print("\n[DRY RUN] No files were written.")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    from markupgen.collisions import check_catalog
    from markupgen.dialects.catalog import all_dialects

    reports = check_catalog(all_dialects())
    failures = 0
    for report in reports:
        if report.passed:
            print(f"  PASS {report.dialect}")
        else:
            failures += 1
            print(f"  FAIL {report.summary()}")

    print(f"\n{len(reports) - failures} passed, {failures} failed")
    return 1 if failures else 0
