"""Shared test fixtures for markupgen."""

import pytest

from markupgen.dialects.model import make_dialect


@pytest.fixture
def minimal_dialect():
    return make_dialect(
        version=["Mini"],
        doc_type=["<!DOCTYPE x>"],
        containers=["div"],
        voids=["br"],
        attributes=["class"],
        self_closing=True,
    )


@pytest.fixture
def nested_dialect():
    return make_dialect(
        version=["Mini", "Loose"],
        doc_type=['<!DOCTYPE html PUBLIC "-//X//EN"', '    "http://example.invalid/x.dtd">'],
        containers=["html", "body", "script", "style", "del"],
        voids=["br", "input"],
        attributes=["class", "http-equiv", "id"],
        self_closing=False,
    )
