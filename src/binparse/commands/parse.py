"""Command: parse binary strings to integers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from binparse.commands._base import BinparseCommand

if TYPE_CHECKING:
    from binparse.commands._context import AppContext


@click.command(
    cls=BinparseCommand,
    examples="""\
  binparse parse 101
  binparse parse 0000101
  binparse --json parse 11111111111111111111111111111111111111111111111111111
  binparse -q parse 1 10 11 nope""",
)
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def parse(app: AppContext, texts: tuple[str, ...]) -> None:
    """Parse one or more unsigned binary strings.

    A single input fails (exit 1) when it is not a valid binary string.
    Several inputs are reported together; invalid ones become warnings.
    """
    from binparse.services.convert import ConvertService

    svc = ConvertService(app.settings)
    if len(texts) == 1:
        app.emit(svc.parse(texts[0]))
    else:
        app.emit(svc.parse_many(texts))
