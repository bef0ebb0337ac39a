"""Unit tests for CLI main entry point."""

import logging

import pytest
from click.testing import CliRunner

from timesheet_checker import __version__
from timesheet_checker.cli import cli
from timesheet_checker.writers.csv_writer import write_csv


class TestCLIMain:
    """Test suite for CLI main entry point."""

    @pytest.fixture
    def runner(self):
        """Create a Click CLI test runner."""
        return CliRunner()

    def test_cli_group_exists(self, runner):
        """Test that CLI group exists and can be invoked."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_cli_help_text(self, runner):
        """Test that CLI help text is informative."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Timesheet Checker CLI" in result.output
        assert "Commands:" in result.output

    def test_cli_version_flag(self, runner):
        """Test that --version flag works."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.parametrize("command", ["check", "export-csv", "submit"])
    def test_commands_registered(self, runner, command):
        """Test that each command is listed in the help."""
        result = runner.invoke(cli, ["--help"])
        assert command in result.output

    def test_unknown_command_shows_error(self, runner):
        """Test that unknown commands show helpful error."""
        result = runner.invoke(cli, ["unknown-command"])
        assert result.exit_code != 0
        assert "No such command" in result.output or "Error" in result.output

    def test_log_level_option(self, runner, tmp_path, sample_rows, mock_env):
        """Test that --log-level configures the root logger."""
        path = write_csv(sample_rows, tmp_path / "week.csv")
        result = runner.invoke(cli, ["--log-level", "error", "check", str(path)])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR
