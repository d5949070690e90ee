"""Tests for the parse command."""

import json

import pytest
from click.testing import CliRunner

from binparse.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestParseCommand:
    def test_single_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "101"])
        assert result.exit_code == 0
        assert "OK  parse" in result.output
        assert "value: 5" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "0000101"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["value"] == 5
        assert data["data"]["significant_bits"] == 3

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "1" * 53])
        assert result.exit_code == 0
        assert result.stdout.strip() == str(2**53 - 1)

    def test_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "0000"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0"

    def test_empty_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", ""])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR  parse" in result.stderr
        assert "Empty string" in result.stderr

    def test_bad_digit_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "0012"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "INVALID_BINARY"
        assert data["error"]["detail"] == {"input": "0012", "reason": "bad_digit", "index": 3}

    def test_too_long(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "1" + "0" * 53])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["detail"]["reason"] == "too_long"

    def test_many_with_warnings(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1", "10", "nope"])
        assert result.exit_code == 0
        assert "3 parsed, 1 invalid" in result.stdout
        assert "WARNING: 'nope': Invalid binary digit 'n' at index 0" in result.stderr

    def test_many_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "1", "10", "nope"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["1", "2", "-"]
        assert "WARNING" not in result.stderr

    def test_many_json_keeps_warnings_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "1", "x"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["invalid_count"] == 1
        assert len(data["warnings"]) == 1
        assert result.stderr == ""

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse"])
        assert result.exit_code == 2

    def test_strip_whitespace_from_config(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "binparse.toml").write_text("[parsing]\nstrip_whitespace = true\n")
        result = cli_runner.invoke(cli, ["-q", "parse", " 11 "])
        assert result.exit_code == 0
        assert result.stdout.strip() == "3"

    def test_whitespace_rejected_by_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", " 11"])
        assert result.exit_code == 1

    def test_bracketed_input_is_rendered_verbatim(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1", "[/x]"])
        assert result.exit_code == 0, result.output
        assert "[/x]" in result.stdout
        assert "1 invalid" in result.stdout
