"""Immutable vocabulary of one markup variant."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class TagKind(Enum):
    """Whether an element encloses content or is a single void tag."""

    CONTAINER = "container"
    VOID = "void"


@dataclass(frozen=True)
class Tag:
    name: str
    kind: TagKind


@dataclass(frozen=True)
class Dialect:
    """One supported markup variant.

    Attributes:
        version: Path segments identifying the dialect, e.g. ("Html4", "Strict").
            Used as the catalog key and as the output package path.
        doc_type: Lines of the document type declaration.
        containers: Elements that may enclose nested content.
        voids: Elements that never enclose content.
        attributes: Attribute names valid in this dialect.
        self_closing: Render void elements with a trailing " />".
        shared: Names acknowledged as both an element and an attribute.
            Elements and attributes land in separate modules, so a listed
            overlap is resolved; an unlisted one is a configuration error.
    """

    version: tuple[str, ...]
    doc_type: tuple[str, ...]
    containers: frozenset[str]
    voids: frozenset[str]
    attributes: frozenset[str]
    self_closing: bool = False
    shared: frozenset[str] = frozenset()

    @property
    def key(self) -> str:
        """Lower-case catalog key, e.g. ``html4-strict``."""
        return "-".join(self.version).lower()

    @property
    def elements(self) -> frozenset[str]:
        return self.containers | self.voids

    def tags(self) -> list[Tag]:
        """All elements tagged with their kind, sorted by name."""
        tags = [Tag(name, TagKind.CONTAINER) for name in self.containers]
        tags += [Tag(name, TagKind.VOID) for name in self.voids]
        return sorted(tags, key=lambda t: (t.name, t.kind.value))

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "version": list(self.version),
            "doc_type": list(self.doc_type),
            "self_closing": self.self_closing,
            "containers": sorted(self.containers),
            "voids": sorted(self.voids),
            "attributes": sorted(self.attributes),
            "shared": sorted(self.shared),
        }

    def __str__(self) -> str:
        return self.key


def make_dialect(
    version: Iterable[str],
    doc_type: Iterable[str],
    containers: Iterable[str],
    voids: Iterable[str],
    attributes: Iterable[str],
    self_closing: bool = False,
    shared: Iterable[str] = (),
) -> Dialect:
    """Build a Dialect from plain iterables."""
    return Dialect(
        version=tuple(version),
        doc_type=tuple(doc_type),
        containers=frozenset(containers),
        voids=frozenset(voids),
        attributes=frozenset(attributes),
        self_closing=self_closing,
        shared=frozenset(shared),
    )


def extend(
    base: Dialect,
    version: Iterable[str],
    doc_type: Iterable[str],
    *,
    containers: Iterable[str] = (),
    voids: Iterable[str] = (),
    attributes: Iterable[str] = (),
    shared: Iterable[str] = (),
    self_closing: bool | None = None,
) -> Dialect:
    """Derive a new dialect from ``base`` plus additional names.

    Names are only ever added. ``self_closing`` is inherited unless given.
    """
    return Dialect(
        version=tuple(version),
        doc_type=tuple(doc_type),
        containers=base.containers | frozenset(containers),
        voids=base.voids | frozenset(voids),
        attributes=base.attributes | frozenset(attributes),
        self_closing=base.self_closing if self_closing is None else self_closing,
        shared=base.shared | frozenset(shared),
    )
