"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, binparse.toml only contains
overrides.  An empty or missing file yields the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- binparse.toml sections ---


class ParseConfig(BaseModel):
    """[parsing] section."""

    model_config = {"frozen": True}

    # Trim surrounding whitespace before parsing; the parser itself never trims.
    strip_whitespace: bool = False


class SelfTestConfig(BaseModel):
    """[selftest] section."""

    model_config = {"frozen": True}

    cases: int = Field(default=1_000_000, ge=1)
    max_length: int = Field(default=53, ge=1, le=256)
    seed: int | None = None


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)

