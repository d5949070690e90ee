"""Subcommand modules for binparse.

Provides register_commands() which uses deferred imports to keep
``binparse --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from binparse.commands.compare import compare
    from binparse.commands.parse import parse
    from binparse.commands.selftest import selftest
    from binparse.commands.sort import sort

    cli.add_command(parse)
    cli.add_command(compare)
    cli.add_command(sort)
    cli.add_command(selftest)
