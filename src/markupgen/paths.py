"""Output location and runtime settings.

Resolves where generated modules go and what they import. Uses environment
variables when available, falls back to conventional defaults. CLI flags
override both.

Environment variables:
    MARKUPGEN_OUTPUT_DIR: destination tree (default: src/markup)
    MARKUPGEN_RUNTIME_MODULE: module providing the rendering primitives
                              (default: markup.internal)
    MARKUPGEN_PACKAGE: dotted package the destination tree maps to
                       (default: markup)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_OUTPUT_DIR = Path("src") / "markup"
_DEFAULT_RUNTIME_MODULE = "markup.internal"
_DEFAULT_PACKAGE = "markup"


def output_dir() -> Path:
    """Return the destination directory for generated modules."""
    return Path(os.environ.get("MARKUPGEN_OUTPUT_DIR", str(_DEFAULT_OUTPUT_DIR)))


def runtime_module() -> str:
    """Return the dotted module generated code imports primitives from."""
    return os.environ.get("MARKUPGEN_RUNTIME_MODULE") or _DEFAULT_RUNTIME_MODULE


def base_package() -> str:
    """Return the dotted package name of the destination tree."""
    return os.environ.get("MARKUPGEN_PACKAGE") or _DEFAULT_PACKAGE
