"""Python source templates for generated combinator modules.

Templates use str.format() with named placeholders. Each template renders
one top-level block of a generated module; blocks are joined by the writer.
"""

from __future__ import annotations

from markupgen import GENERATED_WARNING, GENERATOR_SOURCE

DO_NOT_EDIT = f"""\
{GENERATED_WARNING}
# {GENERATOR_SOURCE}
#"""

# ── Module preamble ───────────────────────────────────────────────

MODULE_HEADER = '''\
{do_not_edit}
"""{docstring}"""

{imports}

{exports}'''

ELEMENT_MODULE_DOC = """\
This module exports HTML combinators used to create documents.

Dialect: {key}
"""

ATTRIBUTE_MODULE_DOC = """\
This module exports combinators that provide you with the
ability to set attributes on HTML elements.

Dialect: {key}
"""

ELEMENT_IMPORTS = ("Html", "Leaf", "Parent", "append", "external", "pre_escaped_text")
ATTRIBUTE_IMPORTS = ("Attribute", "AttributeValue", "attribute")

# ── Document type ─────────────────────────────────────────────────

DOC_TYPE = '''\
{do_not_edit}
def doc_type() -> Html:
    """Combinator for the document type. This should be placed at the top
    of every HTML page.

    Example::

        doc_type()

    Result::

{result}
    """
    return pre_escaped_text({text})'''

DOC_TYPE_HTML = '''\
{do_not_edit}
def doc_type_html(inner: Html) -> Html:
    """Combinator for the ``<html>`` element. This combinator will also
    insert the correct doctype.

    Example::

        doc_type_html(span("foo"))

    Result::

{result}
        <html><span>foo</span></html>
    """
    return append(doc_type(), Parent("html", "<html", "</html>", inner))'''

# ── Elements ──────────────────────────────────────────────────────

CONTAINER = '''\
{do_not_edit}
def {function}(inner: Html) -> Html:
    """Combinator for the ``<{tag}>`` element.

    Example::

        {function}(span("foo"))

    Result::

        <{tag}><span>foo</span></{tag}>
    """
    return Parent({name}, {open_tag}, {close_tag}, {content})'''

VOID = '''\
{do_not_edit}
def {function}() -> Html:
    """Combinator for the ``<{tag}{end}`` element.

    Example::

        {function}()

    Result::

        <{tag}{end}
    """
    return Leaf({name}, {open_tag}, {close_tag})'''

# ── Attributes ────────────────────────────────────────────────────

ATTRIBUTE = '''\
{do_not_edit}
def {function}(value: AttributeValue) -> Attribute:
    """Combinator for the ``{attr}`` attribute.

    Example::

        div("Hello.") % {function}("bar")

    Result::

        <div {attr}="bar">Hello.</div>
    """
    return attribute({name}, {key}, value)'''
