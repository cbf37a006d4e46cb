"""Tests for module assembly and writing."""

import ast
from pathlib import Path
from unittest.mock import patch

import pytest

from markupgen.collisions import ConfigurationError
from markupgen.dialects.catalog import HTML4_STRICT, XHTML1_STRICT, all_dialects
from markupgen.dialects.model import make_dialect
from markupgen.emitter.templates import ELEMENT_IMPORTS
from markupgen.sanitize import sanitize
from markupgen.writer import (
    OutputUnit,
    attribute_module_name,
    attribute_unit,
    element_unit,
    export_list,
    module_name,
    module_paths,
    write_dialect,
)

RUNTIME = "markup.internal"


def _exports(tree: ast.Module) -> list[str]:
    for node in tree.body:
        if isinstance(node, ast.Assign) and node.targets[0].id == "__all__":
            return ast.literal_eval(node.value)
    raise AssertionError("no __all__ in module")


def _defs(tree: ast.Module) -> list[str]:
    return [n.name for n in tree.body if isinstance(n, ast.FunctionDef)]


def _imports(tree: ast.Module) -> tuple[str, list[str]]:
    node = next(n for n in tree.body if isinstance(n, ast.ImportFrom))
    return node.module, [a.name for a in node.names]


def _leaf_close(tree: ast.Module, name: str) -> str:
    node = next(n for n in tree.body if isinstance(n, ast.FunctionDef) and n.name == name)
    return node.body[-1].value.args[2].value


# ── Export list ──────────────────────────────────────────────────


class TestExportList:
    def test_renders_all(self):
        assert export_list(["a", "b"]) == '__all__ = [\n    "a",\n    "b",\n]'

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="without functions"):
            export_list([])


# ── Paths and names ──────────────────────────────────────────────


class TestPaths:
    def test_nested_version(self, tmp_path):
        element, attrs = module_paths(HTML4_STRICT, tmp_path)
        assert element == tmp_path / "html4" / "strict" / "__init__.py"
        assert attrs == tmp_path / "html4" / "strict" / "attributes.py"

    def test_single_segment(self, minimal_dialect):
        element, attrs = module_paths(minimal_dialect, "out")
        assert element == Path("out") / "mini" / "__init__.py"
        assert attrs == Path("out") / "mini" / "attributes.py"

    def test_module_names(self):
        assert module_name(XHTML1_STRICT, "markup") == "markup.xhtml1.strict"
        assert module_name(XHTML1_STRICT) == "xhtml1.strict"
        assert attribute_module_name(XHTML1_STRICT, "markup") == "markup.xhtml1.strict.attributes"

    def test_paths_disjoint_across_catalog(self, tmp_path):
        paths = [p for d in all_dialects() for p in module_paths(d, tmp_path)]
        assert len(paths) == len(set(paths))


# ── Units ────────────────────────────────────────────────────────


class TestMinimalScenario:
    """Minimal dialect: div, br (self-closing), class."""

    def test_element_exports(self, minimal_dialect):
        unit = element_unit(minimal_dialect, "out", RUNTIME)
        assert unit.exports == ["doc_type", "doc_type_html", "br", "div"]

    def test_br_is_self_closing(self, minimal_dialect, tmp_path):
        tree = ast.parse(element_unit(minimal_dialect, tmp_path, RUNTIME).render())
        assert _leaf_close(tree, "br").endswith(" />")

    def test_attribute_exports(self, minimal_dialect):
        unit = attribute_unit(minimal_dialect, "out", RUNTIME)
        assert unit.exports == ["class_"]
        assert 'attribute("class", " class=\\"", value)' in unit.render()


class TestUnits:
    @pytest.mark.parametrize("dialect", all_dialects(), ids=lambda d: d.key)
    def test_exports_match_definitions(self, dialect, tmp_path):
        for unit in (element_unit(dialect, tmp_path, RUNTIME), attribute_unit(dialect, tmp_path, RUNTIME)):
            tree = ast.parse(unit.render())
            exports = _exports(tree)
            defs = _defs(tree)
            assert len(exports) == len(set(exports))
            assert exports == [*defs, *unit.reexports]

    def test_element_order(self, nested_dialect):
        unit = element_unit(nested_dialect, "out", RUNTIME)
        assert unit.exports == [
            "doc_type", "doc_type_html",
            "body", "br", "del_", "html", "input_", "script", "style",
        ]

    def test_attribute_order(self, nested_dialect):
        unit = attribute_unit(nested_dialect, "out", RUNTIME)
        assert unit.exports == ["class_", "http_equiv", "id_"]

    def test_imports(self, nested_dialect):
        module, names = _imports(ast.parse(element_unit(nested_dialect, "out", "my.runtime").render()))
        assert module == "my.runtime"
        assert {"Html", "Leaf", "Parent", "pre_escaped_text"} <= set(names)
        module, names = _imports(ast.parse(attribute_unit(nested_dialect, "out", RUNTIME).render()))
        assert module == RUNTIME
        assert names == ["Attribute", "AttributeValue", "attribute"]

    @pytest.mark.parametrize("dialect", all_dialects(), ids=lambda d: d.key)
    def test_self_closing_policy(self, dialect, tmp_path):
        tree = ast.parse(element_unit(dialect, tmp_path, RUNTIME).render())
        for name in dialect.voids:
            close = _leaf_close(tree, sanitize(name))
            assert close.endswith(" />") == dialect.self_closing

    def test_element_module_reexports_runtime(self, minimal_dialect):
        tree = ast.parse(element_unit(minimal_dialect, "out", RUNTIME).render())
        assert _exports(tree)[-len(ELEMENT_IMPORTS):] == list(ELEMENT_IMPORTS)
        assert attribute_unit(minimal_dialect, "out", RUNTIME).reexports == ()

    def test_single_trailing_newline(self, nested_dialect):
        text = element_unit(nested_dialect, "out", RUNTIME).render()
        assert text.endswith(")\n")
        assert not text.endswith("\n\n")

    def test_header_and_docstring(self, nested_dialect):
        text = attribute_unit(nested_dialect, "out", RUNTIME).render()
        assert text.startswith("# WARNING: The next block of code was automatically generated by\n")
        docstring = ast.get_docstring(ast.parse(text))
        assert "set attributes on HTML elements" in docstring
        assert "mini-loose" in docstring

    def test_render_empty_unit_raises(self):
        unit = OutputUnit(path=Path("x.py"), docstring="x", runtime_module=RUNTIME, imports=())
        with pytest.raises(ValueError):
            unit.render()


# ── Writing ──────────────────────────────────────────────────────


class TestWriteDialect:
    def test_writes_both_files(self, minimal_dialect, tmp_path):
        paths = write_dialect(minimal_dialect, tmp_path, RUNTIME)
        assert paths == list(module_paths(minimal_dialect, tmp_path))
        for p in paths:
            assert p.is_file()
            ast.parse(p.read_text(encoding="utf-8"))

    def test_creates_nested_directories(self, nested_dialect, tmp_path):
        dest = tmp_path / "deep" / "tree"
        write_dialect(nested_dialect, dest, RUNTIME)
        assert (dest / "mini" / "loose" / "attributes.py").is_file()

    def test_deterministic(self, nested_dialect, tmp_path):
        paths = write_dialect(nested_dialect, tmp_path, RUNTIME)
        first = [p.read_bytes() for p in paths]
        write_dialect(nested_dialect, tmp_path, RUNTIME)
        assert [p.read_bytes() for p in paths] == first

    def test_overwrites_existing(self, minimal_dialect, tmp_path):
        element, _ = module_paths(minimal_dialect, tmp_path)
        element.parent.mkdir(parents=True)
        element.write_text("# hand edited\n")
        write_dialect(minimal_dialect, tmp_path, RUNTIME)
        assert "hand edited" not in element.read_text()

    def test_on_write_called_before_each_file(self, minimal_dialect, tmp_path):
        seen = []
        paths = write_dialect(
            minimal_dialect, tmp_path, RUNTIME,
            on_write=lambda p: seen.append((p, p.exists())),
        )
        assert seen == [(p, False) for p in paths]

    def test_on_write_names_the_failing_file(self, minimal_dialect, tmp_path):
        seen = []
        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError):
                write_dialect(minimal_dialect, tmp_path, RUNTIME, on_write=seen.append)
        assert seen == [module_paths(minimal_dialect, tmp_path)[0]]

    def test_dry_run_writes_nothing(self, minimal_dialect, tmp_path):
        paths = write_dialect(minimal_dialect, tmp_path, RUNTIME, dry_run=True)
        assert len(paths) == 2
        assert not any(p.exists() for p in paths)
        assert list(tmp_path.iterdir()) == []

    def test_invalid_dialect_writes_nothing(self, tmp_path):
        bad = make_dialect(["Bad"], ["<!x>"], ["div"], ["div"], ["id"])
        with pytest.raises(ConfigurationError):
            write_dialect(bad, tmp_path, RUNTIME)
        assert list(tmp_path.iterdir()) == []

    def test_filesystem_error_propagates(self, minimal_dialect, tmp_path):
        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            with pytest.raises(PermissionError):
                write_dialect(minimal_dialect, tmp_path, RUNTIME)

    def test_destination_is_a_file(self, minimal_dialect, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(OSError):
            write_dialect(minimal_dialect, blocker, RUNTIME)
