"""Render combinator source text from dialect names."""

from markupgen.emitter.render import (
    render_attribute,
    render_container,
    render_doc_type,
    render_doc_type_html,
    render_tag,
    render_void,
)

__all__ = [
    "render_doc_type",
    "render_doc_type_html",
    "render_container",
    "render_void",
    "render_attribute",
    "render_tag",
]
