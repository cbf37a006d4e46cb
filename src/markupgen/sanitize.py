"""Map raw tag and attribute names to safe Python identifiers.

``http-equiv`` becomes ``http_equiv``; names that would shadow a keyword,
a builtin or a name the generated module binds itself get a trailing
underscore (``class`` -> ``class_``, ``del`` -> ``del_``, ``map`` -> ``map_``).
"""

from __future__ import annotations

import re

# Fixed literal sets so output does not depend on the running interpreter.
PYTHON_KEYWORDS = frozenset({
    "False", "None", "True", "and", "as", "assert", "async", "await",
    "break", "class", "continue", "def", "del", "elif", "else", "except",
    "finally", "for", "from", "global", "if", "import", "in", "is",
    "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
    "while", "with", "yield",
    # soft keywords
    "_", "case", "match", "type",
})

PYTHON_BUILTINS = frozenset({
    "abs", "aiter", "all", "anext", "any", "ascii", "bin", "bool",
    "breakpoint", "bytearray", "bytes", "callable", "chr", "classmethod",
    "compile", "complex", "copyright", "credits", "delattr", "dict", "dir",
    "divmod", "enumerate", "eval", "exec", "exit", "filter", "float",
    "format", "frozenset", "getattr", "globals", "hasattr", "hash", "help",
    "hex", "id", "input", "int", "isinstance", "issubclass", "iter", "len",
    "license", "list", "locals", "map", "max", "memoryview", "min", "next",
    "object", "oct", "open", "ord", "pow", "print", "property", "quit",
    "range", "repr", "reversed", "round", "set", "setattr", "slice",
    "sorted", "staticmethod", "str", "sum", "super", "tuple", "vars", "zip",
})

# Names bound at module level by every generated file.
GENERATED_NAMES = frozenset({
    "doc_type", "doc_type_html",
    "Attribute", "AttributeValue", "Html", "Leaf", "Parent",
    "append", "attribute", "external", "pre_escaped_text",
})

RESERVED = PYTHON_KEYWORDS | PYTHON_BUILTINS | GENERATED_NAMES

_NON_IDENTIFIER = re.compile(r"[^0-9a-z_]")


def sanitize(name: str) -> str:
    """Return the Python function name used for a tag or attribute.

    Raises:
        ValueError: If ``name`` is empty.
    """
    if not name:
        raise ValueError("cannot sanitize an empty name")

    ident = _NON_IDENTIFIER.sub("_", name.lower())
    if ident[0].isdigit():
        ident = "_" + ident
    while ident in RESERVED:
        ident += "_"
    return ident


def is_reserved(ident: str) -> bool:
    return ident in RESERVED
