"""Rich Console factory and theme for binparse output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BINPARSE_THEME = Theme(
    {
        "bp.ok": "bold green",
        "bp.error": "bold red",
        "bp.warning": "bold yellow",
        "bp.op": "bold cyan",
        "bp.key": "dim",
        "bp.input": "bold",
        "bp.value": "bold blue",
        "bp.tier.number": "green",
        "bp.tier.empty": "yellow",
        "bp.tier.invalid": "red",
        "bp.pass": "green",
        "bp.fail": "bold red",
    }
)

_TIER_STYLES: dict[str, str] = {
    "number": "bp.tier.number",
    "empty": "bp.tier.empty",
    "invalid": "bp.tier.invalid",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BINPARSE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(tier: str) -> str:
    """Return the Rich style name for a lenient ranking tier."""
    return _TIER_STYLES.get(tier, "")
