"""Render individual combinator functions as Python source text.

Every function here is pure: same input, same text. The writer decides
order and assembles the results into modules.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence

from markupgen.dialects.model import Tag, TagKind
from markupgen.emitter.templates import (
    ATTRIBUTE,
    CONTAINER,
    DO_NOT_EDIT,
    DOC_TYPE,
    DOC_TYPE_HTML,
    VOID,
)
from markupgen.sanitize import sanitize

# Tags whose content is not itself markup (script and style bodies)
EXTERNAL_TAGS = frozenset({"style", "script"})

_DOC_INDENT = " " * 8


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted Python string literal."""
    return json.dumps(text, ensure_ascii=False)


def _doc(text: str) -> str:
    # Keep docstring contents literal.
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def _doc_lines(lines: Iterable[str]) -> str:
    return "\n".join(_DOC_INDENT + _doc(line) for line in lines)


def render_doc_type(lines: Sequence[str]) -> str:
    """Generate the ``doc_type`` combinator for a document type."""
    text = "".join(line + "\n" for line in lines)
    return DOC_TYPE.format(
        do_not_edit=DO_NOT_EDIT,
        result=_doc_lines(lines),
        text=quote(text),
    )


def render_doc_type_html(lines: Sequence[str]) -> str:
    """Generate ``doc_type_html``: the doctype followed by ``<html>``."""
    return DOC_TYPE_HTML.format(
        do_not_edit=DO_NOT_EDIT,
        result=_doc_lines(lines),
    )


def render_container(tag: str) -> str:
    """Generate a combinator for an element that can be a parent."""
    content = "external(inner)" if tag in EXTERNAL_TAGS else "inner"
    return CONTAINER.format(
        do_not_edit=DO_NOT_EDIT,
        function=sanitize(tag),
        tag=_doc(tag),
        name=quote(tag),
        open_tag=quote(f"<{tag}"),
        close_tag=quote(f"</{tag}>"),
        content=content,
    )


def render_void(tag: str, self_closing: bool) -> str:
    """Generate a combinator for an element that must be a leaf."""
    end = " />" if self_closing else ">"
    return VOID.format(
        do_not_edit=DO_NOT_EDIT,
        function=sanitize(tag),
        tag=_doc(tag),
        end=end,
        name=quote(tag),
        open_tag=quote(f"<{tag}"),
        close_tag=quote(end),
    )


def render_attribute(name: str) -> str:
    """Generate a combinator for an attribute."""
    return ATTRIBUTE.format(
        do_not_edit=DO_NOT_EDIT,
        function=sanitize(name),
        attr=_doc(name),
        name=quote(name),
        key=quote(f' {name}="'),
    )


def render_tag(tag: Tag, self_closing: bool) -> str:
    if tag.kind is TagKind.CONTAINER:
        return render_container(tag.name)
    if tag.kind is TagKind.VOID:
        return render_void(tag.name, self_closing)
    raise ValueError(f"unknown tag kind: {tag.kind!r}")
