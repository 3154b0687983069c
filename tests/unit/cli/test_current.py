"""Unit tests for the current command."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from dver.cli.main import app
from dver.utils.shell import CommandResult
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCurrentCommand:
    """Tests for dver current."""

    def test_prints_version(self) -> None:
        """The resolved SDK version is printed."""
        with patch("dver.scanners.dotnet.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="9.0.100\n", stderr="", returncode=0)
            result = runner.invoke(app, ["current"])

        assert result.exit_code == 0
        assert "Current dotnet version: 9.0.100" in result.stdout
        assert "Pinned" not in result.stdout

    def test_shows_pin(self, workdir: Path) -> None:
        """A global.json pin in the working directory is shown."""
        (workdir / "global.json").write_text(json.dumps({"sdk": {"version": "8.0.406"}}))

        with patch("dver.scanners.dotnet.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="8.0.406\n", stderr="", returncode=0)
            result = runner.invoke(app, ["current"])

        assert result.exit_code == 0
        assert "Pinned by global.json: 8.0.406" in result.stdout

    def test_quiet_hides_pin(self, workdir: Path) -> None:
        """--quiet prints only the resolved version."""
        (workdir / "global.json").write_text(json.dumps({"sdk": {"version": "8.0.406"}}))

        with patch("dver.scanners.dotnet.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="8.0.406\n", stderr="", returncode=0)
            result = runner.invoke(app, ["-q", "current"])

        assert result.exit_code == 0
        assert "Current dotnet version: 8.0.406" in result.stdout
        assert "Pinned" not in result.stdout

    def test_failure_exits_nonzero(self) -> None:
        """A failing dotnet exits 1 with the error."""
        with patch("dver.scanners.dotnet.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="", stderr="A compatible SDK was not found.", returncode=145
            )
            result = runner.invoke(app, ["current"])

        assert result.exit_code == 1
        assert "Failed to get current dotnet version" in result.output
