"""Tests for config file discovery."""

from pathlib import Path

import pytest

from binparse.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[selftest]\ncases = 10\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / CONFIG_FILENAME).write_text("")
        assert find_config(inner) == inner / CONFIG_FILENAME

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    @pytest.mark.parametrize("marker", [".git", ".hg"])
    def test_stops_at_project_root(self, tmp_path: Path, marker: str) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        project = tmp_path / "project"
        (project / marker).mkdir(parents=True)
        src = project / "src"
        src.mkdir()
        assert find_config(src) is None

    def test_config_at_project_root_is_found(self, tmp_path: Path) -> None:
        project = tmp_path / "project"
        (project / ".git").mkdir(parents=True)
        config_file = project / CONFIG_FILENAME
        config_file.write_text("")
        src = project / "src"
        src.mkdir()
        assert find_config(src) == config_file


class TestEnvOverride:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_beats_walk_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file_is_returned(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        missing = tmp_path / "missing.toml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(missing))
        assert find_config(tmp_path) == missing
