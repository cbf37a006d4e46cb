"""Generate every cataloged dialect.

The run:
1. Select dialects (all, or the requested keys)
2. Check every selected dialect; any failure aborts before writing
3. Write each dialect's element and attribute modules

Dialects are independent; order does not affect the result.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from markupgen.collisions import ConfigurationError, check_catalog
from markupgen.dialects.catalog import all_dialects
from markupgen.dialects.model import Dialect
from markupgen.writer import write_dialect


def select_dialects(
    dialects: Iterable[Dialect],
    only: Iterable[str] | None = None,
) -> list[Dialect]:
    """Return the dialects to generate, in catalog order.

    Raises:
        ConfigurationError: On duplicate catalog keys or unknown keys in ``only``.
    """
    dialects = list(dialects)
    counts = Counter(d.key for d in dialects)
    duplicates = sorted(k for k, n in counts.items() if n > 1)
    if duplicates:
        raise ConfigurationError(f"duplicate dialect keys: {', '.join(duplicates)}")

    if not only:
        return dialects

    wanted = {k.lower() for k in only}
    unknown = sorted(wanted - set(counts))
    if unknown:
        raise ConfigurationError(
            f"unknown dialect(s): {', '.join(unknown)} "
            f"(known: {', '.join(sorted(counts))})"
        )
    return [d for d in dialects if d.key in wanted]


def generate_all(
    dialects: Iterable[Dialect] | None = None,
    dest: Path | str | None = None,
    runtime_module: str | None = None,
    only: Iterable[str] | None = None,
    dry_run: bool = False,
    on_write: Callable[[Path], None] | None = None,
) -> dict[str, Any]:
    """Generate element and attribute modules for every selected dialect.

    Args:
        dialects: Dialects to consider (default: the full catalog).
        dest: Destination tree (default: ``paths.output_dir()``).
        runtime_module: Module generated code imports primitives from
            (default: ``paths.runtime_module()``).
        only: Restrict generation to these dialect keys.
        dry_run: If True, render everything but write nothing.
        on_write: Called with each path just before it is written.

    Returns:
        Summary dict with a ``generated`` list of {dialect, paths} entries.

    Raises:
        ConfigurationError: If any selected dialect fails its checks.
        OSError: If a directory or file cannot be written.
    """
    from markupgen.paths import output_dir, runtime_module as default_runtime_module

    selected = select_dialects(all_dialects() if dialects is None else dialects, only)
    target = Path(dest) if dest else output_dir()
    module = runtime_module or default_runtime_module()
    if not all(part.isidentifier() for part in module.split(".")):
        raise ConfigurationError(f"invalid runtime module name: {module!r}")

    failed = [r for r in check_catalog(selected) if not r.passed]
    if failed:
        raise ConfigurationError("\n".join(r.summary() for r in failed))

    generated = []
    for dialect in selected:
        paths = write_dialect(dialect, target, module, dry_run=dry_run, on_write=on_write)
        generated.append({"dialect": dialect.key, "paths": [str(p) for p in paths]})

    return {
        "generated": generated,
        "dest": str(target),
        "dry_run": dry_run,
    }
