"""End-to-end CLI integration tests.

Invokes pgscript as a subprocess to verify real command execution.
"""

import json
import subprocess
import sys
from pathlib import Path

from pgscript.cli import main


def _run_pgscript(*args: str, cwd: str | Path | None = None) -> subprocess.CompletedProcess:
    """Run pgscript as a subprocess."""
    return subprocess.run(
        [sys.executable, "-m", "pgscript", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=cwd,
        timeout=120,
    )


class TestCLIHelp:
    def test_main_help(self):
        result = _run_pgscript("--help")
        assert result.returncode == 0
        assert "pgscript" in result.stdout

    def test_convert_help(self):
        result = _run_pgscript("convert", "--help")
        assert result.returncode == 0
        assert "--strict" in result.stdout

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "Available commands" in capsys.readouterr().out


class TestConvertCommand:
    def test_convert(self, project_dir):
        result = _run_pgscript("convert", str(project_dir / "options.json"))

        assert result.returncode == 0, result.stderr
        data = json.loads((project_dir / "dist" / "chapter1" / "intro.json").read_text("utf-8"))
        assert data["version"] == "1.2.3"

    def test_convert_via_main(self, project_dir):
        assert main(["-q", "convert", str(project_dir / "options.json")]) == 0


class TestCheckCommand:
    def test_check_json(self, tmp_path, story):
        path = tmp_path / "story.json"
        path.write_text(json.dumps(story, ensure_ascii=False), encoding="utf-8")
        (tmp_path / "options.json").write_text("{}", encoding="utf-8")

        result = _run_pgscript("check", str(path), "-j", cwd=tmp_path)

        assert result.returncode == 0, result.stderr
        assert json.loads(result.stdout)[str(path)]["name"] == "Chapter 1"


class TestKindsCommand:
    def test_kinds(self):
        result = _run_pgscript("kinds")
        assert result.returncode == 0
        assert "btn" in result.stdout
