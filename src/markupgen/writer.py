"""Assemble and write the two generated modules of a dialect.

Layout for version ("Html4", "Strict") under <dest>:

    <dest>/html4/strict/__init__.py     element combinators
    <dest>/html4/strict/attributes.py   attribute combinators

Both files are overwritten unconditionally on every run.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from markupgen.collisions import ELEMENT_MODULE_NAMES, ensure_valid
from markupgen.dialects.model import Dialect
from markupgen.emitter.render import (
    render_attribute,
    render_doc_type,
    render_doc_type_html,
    render_tag,
)
from markupgen.emitter.templates import (
    ATTRIBUTE_IMPORTS,
    ATTRIBUTE_MODULE_DOC,
    DO_NOT_EDIT,
    ELEMENT_IMPORTS,
    ELEMENT_MODULE_DOC,
    MODULE_HEADER,
)
from markupgen.sanitize import sanitize

ELEMENT_FILE = "__init__.py"
ATTRIBUTE_FILE = "attributes.py"
ATTRIBUTE_MODULE = "attributes"


@dataclass
class OutputUnit:
    """One generated source file before serialization."""

    path: Path
    docstring: str
    runtime_module: str
    imports: Sequence[str]
    exports: list[str] = field(default_factory=list)
    blocks: list[str] = field(default_factory=list)
    reexports: Sequence[str] = ()

    def render(self) -> str:
        header = MODULE_HEADER.format(
            do_not_edit=DO_NOT_EDIT,
            docstring=self.docstring,
            imports=import_block(self.runtime_module, self.imports),
            exports=export_list([*self.exports, *self.reexports]),
        )
        text = "\n\n\n".join([header, *self.blocks])
        return text.rstrip("\n") + "\n"


def export_list(functions: Sequence[str]) -> str:
    """Generate the ``__all__`` list of a generated module.

    Raises:
        ValueError: If there are no functions to export.
    """
    if not functions:
        raise ValueError("export list without functions")
    lines = ["__all__ = ["]
    lines.extend(f'    "{name}",' for name in functions)
    lines.append("]")
    return "\n".join(lines)


def import_block(module: str, names: Iterable[str]) -> str:
    lines = [f"from {module} import ("]
    lines.extend(f"    {name}," for name in names)
    lines.append(")")
    return "\n".join(lines)


def package_segments(dialect: Dialect) -> list[str]:
    return [segment.lower() for segment in dialect.version]


def module_paths(dialect: Dialect, dest: Path | str) -> tuple[Path, Path]:
    """Return (element module path, attribute module path) under ``dest``."""
    base = Path(dest).joinpath(*package_segments(dialect))
    return base / ELEMENT_FILE, base / ATTRIBUTE_FILE


def module_name(dialect: Dialect, package: str | None = None) -> str:
    """Dotted name of the element module, e.g. ``markup.html4.strict``."""
    parts = package_segments(dialect)
    if package:
        parts.insert(0, package)
    return ".".join(parts)


def attribute_module_name(dialect: Dialect, package: str | None = None) -> str:
    return f"{module_name(dialect, package)}.{ATTRIBUTE_MODULE}"


def element_unit(dialect: Dialect, dest: Path | str, runtime_module: str) -> OutputUnit:
    """Build the element module: doc_type helpers followed by every tag.

    The runtime primitives are re-exported, so importing the element module
    alone is enough to build and combine documents.
    """
    tags = dialect.tags()
    unit = OutputUnit(
        path=module_paths(dialect, dest)[0],
        docstring=ELEMENT_MODULE_DOC.format(key=dialect.key),
        runtime_module=runtime_module,
        imports=ELEMENT_IMPORTS,
        reexports=ELEMENT_IMPORTS,
    )
    unit.exports = [*ELEMENT_MODULE_NAMES, *(sanitize(t.name) for t in tags)]
    unit.blocks = [
        render_doc_type(dialect.doc_type),
        render_doc_type_html(dialect.doc_type),
        *(render_tag(t, dialect.self_closing) for t in tags),
    ]
    return unit


def attribute_unit(dialect: Dialect, dest: Path | str, runtime_module: str) -> OutputUnit:
    """Build the attribute module, sorted by attribute name."""
    names = sorted(dialect.attributes)
    return OutputUnit(
        path=module_paths(dialect, dest)[1],
        docstring=ATTRIBUTE_MODULE_DOC.format(key=dialect.key),
        runtime_module=runtime_module,
        imports=ATTRIBUTE_IMPORTS,
        exports=[sanitize(name) for name in names],
        blocks=[render_attribute(name) for name in names],
    )


def write_dialect(
    dialect: Dialect,
    dest: Path | str,
    runtime_module: str,
    dry_run: bool = False,
    on_write: Callable[[Path], None] | None = None,
) -> list[Path]:
    """Write both modules of a dialect and return their paths.

    The dialect is validated before anything touches the filesystem.
    ``on_write`` is called with each path just before that file is written
    (also on a dry run). OSError from directory creation or writing
    propagates to the caller.

    Raises:
        ConfigurationError: If the dialect fails the pre-flight checks.
    """
    ensure_valid(dialect)

    units = [
        element_unit(dialect, dest, runtime_module),
        attribute_unit(dialect, dest, runtime_module),
    ]
    # Nothing is written until both units have rendered.
    contents = [(unit.path, unit.render()) for unit in units]

    for path, text in contents:
        if on_write is not None:
            on_write(path)
        if not dry_run:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")

    return [path for path, _ in contents]
