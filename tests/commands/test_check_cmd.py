"""Tests for pgscript check and pgscript kinds."""

import argparse
import json

import pytest

from pgscript.commands import check, kinds
from tests.core.graph_test_helpers import make_edge, make_graph, make_node


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run from a directory holding an empty options file so defaults apply."""
    (tmp_path / "options.json").write_text("{}", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _args(files, strict=False, entity_type=None, as_json=False, quiet=False, options=None):
    return argparse.Namespace(
        files=files,
        strict=strict,
        entity_type=entity_type,
        json=as_json,
        quiet=quiet,
        options=options,
    )


class TestCheck:
    def test_summary(self, tmp_path, story, capsys):
        path = tmp_path / "story.json"
        path.write_text(json.dumps(story), encoding="utf-8")

        assert check.run(_args([path])) == 0

        out = capsys.readouterr().out
        assert "'Chapter 1' v1.2.3, 6 entities, 2 roles" in out

    def test_json_output(self, tmp_path, story, capsys):
        path = tmp_path / "story.json"
        path.write_text(json.dumps(story), encoding="utf-8")

        assert check.run(_args([path], as_json=True)) == 0

        data = json.loads(capsys.readouterr().out)
        assert data[str(path)]["root"] == "root"

    def test_failure(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(make_graph([make_node("x", "nonsense")])), encoding="utf-8")

        assert check.run(_args([path])) == 1
        assert "Unknown node kind" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert check.run(_args([tmp_path / "missing.json"])) == 1
        assert "missing.json" in capsys.readouterr().err

    def test_entity_type_override(self, tmp_path):
        path = tmp_path / "g.json"
        path.write_text(json.dumps(make_graph([make_node("t", "text", node_type="text-node")])))

        assert check.run(_args([path], quiet=True)) == 1
        assert check.run(_args([path], entity_type="text-node", quiet=True)) == 0


class TestCheckConfiguration:
    """check reads [parser] settings the same way convert does."""

    def _write(self, workdir, toml):
        (workdir / "options.json").unlink()
        (workdir / "pgscript.toml").write_text(toml, encoding="utf-8")
        path = workdir / "g.json"
        path.write_text(
            json.dumps(make_graph([make_node("t", "text", node_type="text-node")])),
            encoding="utf-8",
        )
        return path

    def test_discovered_parser_section(self, workdir, capsys):
        path = self._write(
            workdir, '[parser]\nentity_type = "text-node"\ndefault_name = "Prologue"\n'
        )

        assert check.run(_args([path])) == 0
        assert "'Prologue' v0.0.0" in capsys.readouterr().out

    def test_explicit_options_path(self, workdir, tmp_path_factory):
        other = tmp_path_factory.mktemp("elsewhere")
        (other / "pgscript.toml").write_text('[parser]\nentity_type = "text-node"\n')
        path = self._write(workdir, "")

        assert check.run(_args([path], quiet=True)) == 1
        assert check.run(_args([path], quiet=True, options=other / "pgscript.toml")) == 0

    def test_cli_entity_type_wins(self, workdir):
        path = self._write(workdir, '[parser]\nentity_type = "core:text_node"\n')

        assert check.run(_args([path], entity_type="text-node", quiet=True)) == 0

    def test_strict_from_config(self, workdir):
        (workdir / "strict.toml").write_text("[parser]\nstrict = true\n")
        path = workdir / "d.json"
        path.write_text(json.dumps(make_graph([make_node("t", "text")], [make_edge("t", "x")])))

        assert check.run(_args([path], quiet=True, options=workdir / "strict.toml")) == 1
        assert check.run(_args([path], quiet=True)) == 0

    def test_invalid_options_file(self, workdir, capsys):
        (workdir / "options.json").write_text("{", encoding="utf-8")

        assert check.run(_args([workdir / "g.json"])) == 1
        assert "Failed to read options" in capsys.readouterr().err


class TestKinds:
    def test_lists_keywords(self, capsys):
        assert kinds.run(argparse.Namespace()) == 0

        out = capsys.readouterr().out
        assert "zhao-cha" in out
        assert "success  process, result" in out
        assert "version" in out
