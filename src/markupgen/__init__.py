"""Markup combinator generator.

Generates Python modules of element and attribute construction functions
for every supported markup dialect (HTML 4.01, XHTML 1.0, HTML5, XHTML5).
Each dialect yields two modules:

    <dest>/<version...>/__init__.py    element combinators + doc_type helpers
    <dest>/<version...>/attributes.py  attribute combinators

Every generated block is preceded by a warning marker:
    # WARNING: The next block of code was automatically generated by
    # markupgen/emitter/render.py
    #

Generated files are always rewritten in full; never edit them by hand.
"""

__version__ = "0.1.0"

# Marker constants used by the emitter and the tests
GENERATED_WARNING = "# WARNING: The next block of code was automatically generated by"
GENERATOR_SOURCE = "markupgen/emitter/render.py"
