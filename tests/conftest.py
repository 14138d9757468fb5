"""Pytest fixtures shared across the test suite."""

import json

import pytest


@pytest.fixture
def story():
    """A complete, valid graph document dict."""
    from tests.core.graph_test_helpers import story_graph

    return story_graph()


@pytest.fixture
def project_dir(tmp_path, story):
    """Options file plus two input directories, as laid out by the editor workflow."""
    chapter1 = tmp_path / "chapter1"
    chapter1.mkdir()
    (chapter1 / "intro.json").write_text(json.dumps(story), encoding="utf-8")
    (chapter1 / "notes.txt").write_text("not a graph", encoding="utf-8")

    chapter2 = tmp_path / "chapter2"
    chapter2.mkdir()
    (chapter2 / "OUTRO.JSON").write_text(json.dumps(story), encoding="utf-8")

    (tmp_path / "options.json").write_text(
        json.dumps({"input": ["chapter1", "chapter2"], "output": "dist"}), encoding="utf-8"
    )
    return tmp_path
