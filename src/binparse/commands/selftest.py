"""Command: randomized self-check of the parser and comparators."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from binparse.commands._base import BinparseCommand

if TYPE_CHECKING:
    from binparse.commands._context import AppContext


@click.command(
    cls=BinparseCommand,
    examples="""\
  binparse selftest
  binparse selftest --cases 10000 --seed 42
  binparse --json selftest --cases 1000 --max-length 60""",
)
@click.option(
    "--cases",
    type=click.IntRange(min=1),
    default=None,
    help="Random strings to generate (default from [selftest] config).",
)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible run.")
@click.option(
    "--max-length",
    type=click.IntRange(min=1, max=256),
    default=None,
    help="Longest random string, in digits.",
)
@click.pass_obj
def selftest(
    app: AppContext,
    cases: int | None,
    seed: int | None,
    max_length: int | None,
) -> None:
    """Check parsing and comparison against Python's int(text, 2)."""
    from binparse.services.selftest import SelfTestService

    app.emit(SelfTestService(app.settings).run(cases=cases, seed=seed, max_length=max_length))
