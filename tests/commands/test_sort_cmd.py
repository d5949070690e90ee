"""Tests for the sort command."""

import json

import pytest
from click.testing import CliRunner

from binparse.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestSortCommand:
    def test_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sort", "11", "1", "abc", "0"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["abc", "0", "1", "11"]

    def test_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sort", "--reverse", "1", "101", "x"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["101", "1", "x"]

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sort", "--stdin"], input="11\n1\nx\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["x", "1", "11"]

    def test_stdin_blank_line_is_empty_tier(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "sort", "--stdin"], input="1\n\nz\n")
        assert result.exit_code == 0
        items = json.loads(result.stdout)["data"]["items"]
        assert [i["tier"] for i in items] == ["invalid", "empty", "number"]
        assert items[2]["value"] == 1

    def test_stdin_and_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sort", "--stdin", "111"], input="10\r\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["10", "111"]

    def test_no_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort"])
        assert result.exit_code == 2
        assert "--stdin" in result.output

    def test_table_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1", "q"])
        assert result.exit_code == 0
        assert "OK  sort" in result.stdout
        assert "Tier" in result.stdout

    def test_bracketed_input_is_rendered_verbatim(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1", "[/]", "[red]ab"])
        assert result.exit_code == 0, result.output
        assert "[/]" in result.stdout
        assert "[red]ab" in result.stdout
