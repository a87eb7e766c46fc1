"""Tests for the command line entry point."""

import pytest
from typer.testing import CliRunner

from exprcalc.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestModeSelection:
    """Tests for --infix / --postfix."""

    def test_default_mode_message(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, [], input="2+3*4\nexit\n")

        assert result.exit_code == 0
        assert "No mode specified, defaulting to infix." in result.output
        assert "INFIX > " in result.output
        assert "14" in result.output

    def test_infix_flag(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--infix"], input="(2+3)*4\nexit\n")

        assert result.exit_code == 0
        assert "No mode specified" not in result.output
        assert "20" in result.output

    def test_postfix_flag(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--postfix"], input="2 3 4 * +\nexit\n")

        assert result.exit_code == 0
        assert "POSTFIX > " in result.output
        assert "14" in result.output

    def test_unknown_option_is_fatal(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--prefix"])
        assert result.exit_code != 0


class TestSession:
    """End-to-end sessions through the CLI."""

    def test_variables_session(self, cli_runner: CliRunner):
        session = "x = 2+3\ny = x*2\ny+1\ndefined\nexit\n"
        result = cli_runner.invoke(app, ["--infix"], input=session)

        assert result.exit_code == 0
        assert "Assignment: x = 2+3" in result.output
        assert "11" in result.output
        assert "Here is a list of defined variables:" in result.output

    def test_end_of_input_exits_cleanly(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--infix"], input="1+1\n")
        assert result.exit_code == 0

    def test_no_cycle_check(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            app, ["--no-cycle-check"], input="x = x+1\nx\nexit\n"
        )

        assert result.exit_code == 0
        assert "exceeded 100 levels" in result.output


class TestLogging:
    """Tests for --log-level."""

    def test_invalid_level(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--log-level", "LOUD"], input="exit\n")
        assert result.exit_code != 0

    def test_debug_level_accepted(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--log-level", "debug"], input="exit\n")
        assert result.exit_code == 0
