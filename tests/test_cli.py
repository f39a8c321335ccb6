"""Tests for the root dyndomain group: global options and registration."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dyndomain import __version__
from dyndomain.cli import cli

COMMANDS = ["render", "enumerate", "check"]


class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"dyndomain, version {__version__}" in result.output

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_no_args_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output
        for name in COMMANDS:
            assert name in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "$ dyndomain -s , render --ge 1" in result.output

    @pytest.mark.parametrize("command", COMMANDS)
    def test_command_help(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0, result.output
        assert "--gt" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestSeparatorOption:
    def test_applies_to_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "-s", ",", "render", "--gt", "5", "--lt", "10"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "(5,10)"

    def test_applies_to_notation_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "--separator", "|", "check", "3", "--notation", "[1|5]"]
        )
        assert result.output.strip() == "yes"

    def test_beats_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "dyndomain.toml").write_text('[notation]\nseparator = ","\n')
        result = cli_runner.invoke(cli, ["-q", "-s", "|", "render", "--ge", "0"])
        assert result.output.strip() == "(-1|∞)"

    @pytest.mark.parametrize("separator", ["⋃", "-", " "])
    def test_unparseable_separator_is_usage_error(
        self, cli_runner: CliRunner, separator: str
    ) -> None:
        result = cli_runner.invoke(cli, ["-s", separator, "render"])
        assert result.exit_code == 2
        assert "separator" in result.output.lower()


@pytest.mark.usefixtures("_isolated_cwd")
class TestConfigOption:
    def test_explicit_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "limits.toml"
        config.write_text("[enumerate]\ndefault_limit = 3\n")
        result = cli_runner.invoke(cli, ["--json", "-c", str(config), "enumerate", "--gt", "0"])
        assert json.loads(result.output)["data"]["members"] == [1, 2, 3]

    def test_missing_file_falls_back_to_defaults(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "-c", "missing.toml", "render", "--gt", "0"])
        assert result.exit_code == 0
        assert result.output.strip() == "(0;∞)"

    def test_source_reported_in_json_meta(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "dyndomain.toml"
        config.write_text('[notation]\nseparator = ","\n')
        result = cli_runner.invoke(cli, ["--json", "render"])
        data = json.loads(result.output)
        assert data["meta"]["config"]["sections"] == ["notation"]
        assert Path(data["meta"]["config"]["path"]).name == "dyndomain.toml"

    def test_unknown_key_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "dyndomain.toml").write_text("quiet = true\n")
        result = cli_runner.invoke(cli, ["render"])
        assert result.exit_code == 0
        assert "Ignoring unknown key 'quiet'" in result.output

    def test_invalid_value_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "dyndomain.toml").write_text("[enumerate]\nmax_limit = 0\n")
        result = cli_runner.invoke(cli, ["render"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
@pytest.mark.usefixtures("_isolated_cwd")
def test_output_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "check", "1"])
    assert result.exit_code == 0, result.output
