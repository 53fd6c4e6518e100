"""Smoke tests for CLI commands.

Uses Click's CliRunner; every invocation points --config at a temporary
path so the user's own configuration is never read.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from oscgrid.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove handlers the CLI installs so later tests don't log to a closed stream."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def config_args(tmp_path):
    """Global options pointing at a temporary config file."""
    return ["--config", str(tmp_path / "config.json")]


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "oscgrid" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("command", ["send", "replay", "key", "addresses", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestGridCommands:
    """Test send, replay, key and addresses."""

    def test_send(self, runner, config_args):
        result = runner.invoke(cli, [*config_args, "send", "/grid/led/set", "15", "0", "1"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "-" * 48
        assert lines[1].endswith(" 15")

    def test_send_negative_level(self, runner, config_args):
        """Test negative numbers are arguments, not options."""
        result = runner.invoke(cli, [*config_args, "send", "/grid/led/level/set", "0", "0", "-1"])
        assert result.exit_code == 0
        assert " -1" in result.output

    def test_send_parse_error(self, runner, config_args):
        result = runner.invoke(cli, [*config_args, "send", "/grid/led/level/set", "0", "0"])
        assert result.exit_code == 1
        assert "expected 3 arguments, got: 2" in result.output

    def test_send_type_error(self, runner, config_args):
        result = runner.invoke(cli, [*config_args, "send", "/grid/led/all", "on"])
        assert result.exit_code == 1
        assert "expected int, got: str" in result.output

    def test_send_with_prefix(self, runner, config_args):
        result = runner.invoke(
            cli, [*config_args, "send", "--prefix", "/monome", "/monome/grid/led/all", "1"]
        )
        assert result.exit_code == 0
        assert "  0" not in result.output

    def test_replay(self, runner, config_args, tmp_path):
        messages = tmp_path / "messages.txt"
        messages.write_text(
            "# warm up\n"
            "/grid/led/all 1\n"
            "\n"
            "/grid/led/level/row 0 0 1 2 3 4 5 6 7\n"
            "/grid/led/level/set 0 0 4\n"
        )
        result = runner.invoke(cli, [*config_args, "replay", str(messages)])
        assert result.exit_code == 0
        assert "Applied 2 message(s), dropped 1" in result.output
        assert "line 4" in result.output
        assert result.output.splitlines()[1].startswith("  4 15")

    def test_replay_strict(self, runner, config_args, tmp_path):
        messages = tmp_path / "messages.txt"
        messages.write_text("/grid/led/level/set 99 0 4\n")
        result = runner.invoke(cli, [*config_args, "replay", "--strict", str(messages)])
        assert result.exit_code == 1

    def test_key(self, runner, config_args):
        result = runner.invoke(cli, [*config_args, "key", "2", "5", "--prefix", "/monome"])
        assert result.exit_code == 0
        assert result.output.strip() == "/monome/grid/key 2 5 1"

    def test_key_up(self, runner, config_args):
        result = runner.invoke(cli, [*config_args, "key", "2", "5", "--up"])
        assert result.output.strip() == "/grid/key 2 5 0"

    def test_key_negative_coordinate(self, runner, config_args):
        """Test negative coordinates reach the command instead of option parsing."""
        result = runner.invoke(cli, [*config_args, "key", "-1", "0"])
        assert result.exit_code == 0
        assert result.output.strip() == "/grid/key -1 0 1"

    def test_send_oversized_level(self, runner, config_args):
        result = runner.invoke(cli, [*config_args, "send", "/grid/led/level/set", "0", "0", str(2**64)])
        assert result.exit_code == 1
        assert "does not fit a grid cell" in result.output

    def test_addresses(self, runner):
        result = runner.invoke(cli, ["addresses"])
        assert result.exit_code == 0
        assert "/grid/led/level/map" in result.output
        assert "MapCommand" in result.output


@pytest.mark.integration
class TestConfigCommands:
    """Test config init and show."""

    def test_init_and_show(self, runner, config_args, tmp_path):
        result = runner.invoke(cli, [*config_args, "config", "init", "--rows", "16", "--prefix", "/monome"])
        assert result.exit_code == 0
        assert json.loads((tmp_path / "config.json").read_text())["rows"] == 16

        result = runner.invoke(cli, [*config_args, "config", "show"])
        assert result.exit_code == 0
        assert '"prefix": "/monome"' in result.output

    def test_init_refuses_overwrite(self, runner, config_args):
        runner.invoke(cli, [*config_args, "config", "init"])
        result = runner.invoke(cli, [*config_args, "config", "init"])
        assert result.exit_code == 1

    def test_init_invalid_value(self, runner, config_args):
        result = runner.invoke(cli, [*config_args, "config", "init", "--prefix", "monome"])
        assert result.exit_code == 1
        assert "prefix" in result.output

    def test_configured_prefix_used(self, runner, config_args):
        runner.invoke(cli, [*config_args, "config", "init", "--prefix", "/monome"])
        result = runner.invoke(cli, [*config_args, "key", "0", "0"])
        assert result.output.strip() == "/monome/grid/key 0 0 1"
