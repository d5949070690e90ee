"""Shared pytest fixtures for binparse tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from binparse.config.settings import BinparseSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BINPARSE_* environment out of the tests."""
    for name in ("BINPARSE_CONFIG", "BINPARSE_QUIET", "BINPARSE_VERBOSE", "BINPARSE_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the binparse logger after each test.

    CLI invocations reconfigure logging against CliRunner's temporary
    streams; later tests must not log into those closed streams.
    """
    bp = logging.getLogger("binparse")
    handlers = bp.handlers[:]
    level = bp.level
    propagate = bp.propagate
    yield
    bp.handlers = handlers
    bp.setLevel(level)
    bp.propagate = propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> BinparseSettings:
    """Settings built from defaults only (no TOML on the walk-up path)."""
    return BinparseSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so no stray binparse.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
