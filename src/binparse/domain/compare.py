"""Strict and lenient comparison of unsigned binary strings.

Strict comparison only orders strings that both parse; anything else is
incomparable (None).  Lenient comparison is a total order over all strings:

    invalid  <  empty  <  valid number

Ties inside the invalid and empty tiers are EQUAL regardless of content.

INVARIANT: compare_lenient(a, b) == compare of lenient_sort_key(a) and
lenient_sort_key(b), so sorting by the key and sorting by the comparator
agree.
"""

from __future__ import annotations

from collections.abc import Iterable

from binparse.domain.binary import parse_unsigned_binary
from binparse.domain.types import Ordering, RankTier


def compare_strict(first: str, second: str) -> Ordering | None:
    """Compare two binary strings by numeric value.

    Returns None when either side fails to parse.  Does not raise on its
    own; a TypeError from the parser propagates unchanged.
    """
    n1 = parse_unsigned_binary(first).value
    n2 = parse_unsigned_binary(second).value
    if n1 is None or n2 is None:
        return None
    return Ordering.of(n1, n2)


def lenient_sort_key(text: str) -> tuple[int, int]:
    """Return ``(tier, value)`` for lenient ordering.

    *value* is the parsed integer in the number tier and 0 elsewhere.
    """
    value = parse_unsigned_binary(text).value
    if value is not None:
        return RankTier.NUMBER, value
    if not text:
        return RankTier.EMPTY, 0
    return RankTier.INVALID, 0


def rank_tier(text: str) -> RankTier:
    """Return the lenient ordering tier of *text*."""
    return RankTier(lenient_sort_key(text)[0])


def compare_lenient(first: str, second: str) -> Ordering:
    """Compare two strings by lenient priority, then numeric value."""
    k1 = lenient_sort_key(first)
    k2 = lenient_sort_key(second)
    if k1 > k2:
        return Ordering.GREATER
    if k1 < k2:
        return Ordering.LESSER
    return Ordering.EQUAL


def sort_lenient(items: Iterable[str], *, reverse: bool = False) -> list[str]:
    """Stable sort of *items* in lenient order."""
    return sorted(items, key=lenient_sort_key, reverse=reverse)
