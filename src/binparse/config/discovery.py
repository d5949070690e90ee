"""Locate the ``binparse.toml`` that applies to the current directory.

Lookup order:
  1. ``BINPARSE_CONFIG`` names the file outright.  The path is returned
     even when it does not exist so the caller can report it instead of
     silently falling back to defaults.
  2. Walk up from the start directory to the nearest ``binparse.toml``.
     The walk stops at the first project root (a directory holding
     ``.git`` or ``.hg``) so a checkout never picks up a config that lives
     above it.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "binparse.toml"
CONFIG_ENV_VAR = "BINPARSE_CONFIG"

_ROOT_MARKERS: tuple[str, ...] = (".git", ".hg")


def _search_dirs(start: Path) -> Iterator[Path]:
    """Yield *start* and its parents, ending at the first project root."""
    current = start.resolve()
    while True:
        yield current
        if any((current / marker).exists() for marker in _ROOT_MARKERS):
            return
        if current.parent == current:
            return
        current = current.parent


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
