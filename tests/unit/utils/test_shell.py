"""Unit tests for process helpers."""

from unittest.mock import MagicMock, patch

import pytest
from dver.utils.shell import CommandResult, command_exists, run_command


class TestRunCommand:
    """Tests for run_command function."""

    @patch("dver.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """run_command returns stdout, stderr and exit code."""
        mock_run.return_value = MagicMock(stdout="9.0.100\n", stderr="", returncode=0)

        result = run_command(["dotnet", "--version"])

        assert result == CommandResult(stdout="9.0.100\n", stderr="", returncode=0)
        assert result.success is True

    @patch("dver.utils.shell.subprocess.run")
    def test_not_time_bounded(self, mock_run: MagicMock) -> None:
        """Install scripts run until they exit; output is captured as text."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(("bash", "dotnet-install.sh"))

        args, kwargs = mock_run.call_args
        assert args[0] == ["bash", "dotnet-install.sh"]
        assert "timeout" not in kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["check"] is False

    @patch("dver.utils.shell.subprocess.run")
    def test_nonzero_exit_is_returned(self, mock_run: MagicMock) -> None:
        """A non-zero exit code is reported, not raised."""
        mock_run.return_value = MagicMock(stdout="", stderr="bad", returncode=2)

        result = run_command(["dotnet", "--list-sdks"])

        assert result.success is False
        assert result.returncode == 2

    @patch("dver.utils.shell.subprocess.run", side_effect=FileNotFoundError("dotnet"))
    def test_missing_executable_raises(self, mock_run: MagicMock) -> None:
        """A missing executable propagates as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            run_command(["dotnet", "--version"])


class TestCommandResult:
    """Tests for CommandResult.error_detail."""

    def test_prefers_stderr(self) -> None:
        result = CommandResult(stdout="out", stderr="  No SDKs were found.\n", returncode=1)
        assert result.error_detail == "No SDKs were found."

    def test_falls_back_to_exit_code(self) -> None:
        result = CommandResult(stdout="out", stderr="", returncode=145)
        assert result.error_detail == "exit code 145"


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("dver.utils.shell.shutil.which", return_value="/usr/bin/dotnet")
    def test_found(self, mock_which: MagicMock) -> None:
        """A command on PATH exists."""
        assert command_exists("dotnet") is True
        mock_which.assert_called_once_with("dotnet")

    @patch("dver.utils.shell.shutil.which", return_value=None)
    def test_missing(self, mock_which: MagicMock) -> None:
        """A command not on PATH does not exist."""
        assert command_exists("dotnet") is False
