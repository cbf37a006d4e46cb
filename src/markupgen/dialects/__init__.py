"""Dialect descriptors and the built-in dialect catalog."""

from markupgen.dialects.catalog import all_dialects, dialect_map, find_dialect
from markupgen.dialects.model import Dialect, Tag, TagKind, extend, make_dialect

__all__ = [
    "Dialect",
    "Tag",
    "TagKind",
    "make_dialect",
    "extend",
    "all_dialects",
    "dialect_map",
    "find_dialect",
]
