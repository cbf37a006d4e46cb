"""Pre-flight validation of dialect descriptors.

Every generation run checks each selected dialect before anything is
written. Any error is a build-breaking configuration error.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from markupgen.dialects.model import Dialect
from markupgen.sanitize import RESERVED, sanitize

# Names every element module defines besides its element combinators
ELEMENT_MODULE_NAMES = ("doc_type", "doc_type_html")


class ConfigurationError(ValueError):
    """A dialect table entry cannot be generated safely."""


@dataclass
class CollisionReport:
    """Result of checking one dialect."""

    dialect: str
    errors: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        if self.passed:
            return f"{self.dialect}: all checks passed."
        lines = [f"{self.dialect}: {len(self.errors)} error(s)"]
        for e in self.errors:
            lines.append(f"  {e}")
        return "\n".join(lines)


def overlapping_names(dialect: Dialect) -> set[str]:
    """Raw names used both as an element and as an attribute."""
    return set(dialect.elements & dialect.attributes)


def has_collision(dialect: Dialect, name: str) -> bool:
    """Check if a given name causes an unresolved name clash.

    An empty name has no identifier and always counts as a collision.
    """
    if not name:
        return True
    # Both an element and an attribute
    if name in dialect.elements and name in dialect.attributes and name not in dialect.shared:
        return True
    # Already a reserved name
    if sanitize(name) in RESERVED:
        return True
    return False


def _duplicate_identifiers(names: Iterable[str], fixed: Iterable[str] = ()) -> list[str]:
    by_ident: dict[str, list[str]] = defaultdict(list)
    for ident in fixed:
        by_ident[ident].append(f"<{ident}>")
    for name in names:
        by_ident[sanitize(name)].append(name)
    return [
        f"identifier '{ident}' generated for {', '.join(sorted(sources))}"
        for ident, sources in sorted(by_ident.items())
        if len(sources) > 1
    ]


def check_dialect(dialect: Dialect) -> CollisionReport:
    """Run every pre-flight check on one dialect.

    Checks:
    - version and doc_type are non-empty
    - containers and voids are disjoint
    - each module has at least one name to export
    - no unacknowledged element/attribute overlap, no reserved identifiers
    - acknowledged shared names really are overlaps
    - no two names in one module sanitize to the same identifier
    """
    result = CollisionReport(dialect=dialect.key or "<unnamed>")

    if not dialect.version:
        result.errors.append("empty version path")
    if not dialect.doc_type:
        result.errors.append("empty doc_type")

    both = dialect.containers & dialect.voids
    for name in sorted(both):
        result.errors.append(f"'{name}' is both a container and a void element")

    if not dialect.attributes:
        result.errors.append("no attributes to export")

    if "" in dialect.elements or "" in dialect.attributes:
        result.errors.append("empty element or attribute name")
        return result

    for name in sorted(dialect.elements | dialect.attributes):
        if not has_collision(dialect, name):
            continue
        if sanitize(name) in RESERVED:
            result.errors.append(f"'{name}' sanitizes to reserved identifier '{sanitize(name)}'")
        else:
            result.errors.append(f"'{name}' is both an element and an attribute")

    overlap = overlapping_names(dialect)
    for name in sorted(dialect.shared - overlap):
        result.errors.append(f"shared name '{name}' is not both an element and an attribute")

    result.errors.extend(_duplicate_identifiers(dialect.elements, ELEMENT_MODULE_NAMES))
    result.errors.extend(_duplicate_identifiers(dialect.attributes))

    return result


def check_catalog(dialects: Iterable[Dialect]) -> list[CollisionReport]:
    return [check_dialect(d) for d in dialects]


def ensure_valid(dialect: Dialect) -> None:
    """Raise ConfigurationError unless ``dialect`` passes every check."""
    report = check_dialect(dialect)
    if not report.passed:
        raise ConfigurationError(report.summary())
