"""Command: compare two binary strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from binparse.commands._base import BinparseCommand

if TYPE_CHECKING:
    from binparse.commands._context import AppContext


@click.command(
    cls=BinparseCommand,
    examples="""\
  binparse compare 101 11
  binparse compare 0 00000
  binparse compare --mode lenient "" 0
  binparse --json compare --mode lenient abc 1""",
)
@click.argument("first")
@click.argument("second")
@click.option(
    "--mode",
    type=click.Choice(["strict", "lenient"]),
    default="strict",
    help="strict: numbers only; lenient: invalid < empty < numbers.",
)
@click.pass_obj
def compare(app: AppContext, first: str, second: str, mode: str) -> None:
    """Compare FIRST and SECOND; prints -1, 0, or 1.

    In strict mode an invalid or empty operand makes the pair
    incomparable and the command exits with status 1.
    """
    from binparse.services.convert import ConvertService

    app.emit(ConvertService(app.settings).compare(first, second, mode=mode))
