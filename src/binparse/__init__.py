"""binparse — unsigned binary string parsing and comparison."""

from __future__ import annotations

__version__ = "0.1.0"
