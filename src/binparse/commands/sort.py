"""Command: sort binary strings in lenient order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from binparse.commands._base import BinparseCommand

if TYPE_CHECKING:
    from binparse.commands._context import AppContext


@click.command(
    cls=BinparseCommand,
    examples="""\
  binparse sort 11 1 abc 0 ""
  binparse sort --reverse 101 1
  printf '11\\n1\\nxyz\\n' | binparse -q sort --stdin""",
)
@click.argument("texts", nargs=-1)
@click.option("--reverse", is_flag=True, help="Largest first.")
@click.option("--stdin", "from_stdin", is_flag=True, help="Read one string per line from stdin.")
@click.pass_obj
def sort(app: AppContext, texts: tuple[str, ...], reverse: bool, from_stdin: bool) -> None:
    """Sort strings: invalid first, then empty, then numbers by value."""
    from binparse.services.convert import ConvertService

    items = list(texts)
    if from_stdin:
        stream = click.get_text_stream("stdin")
        items.extend(line.rstrip("\r\n") for line in stream)
    if not items:
        msg = "Provide strings as arguments or pass --stdin."
        raise click.UsageError(msg)

    app.emit(ConvertService(app.settings).sort(items, reverse=reverse))
