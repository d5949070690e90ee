"""Comparison outcomes, lenient ranking tiers, and parse failure reasons."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Ordering(IntEnum):
    """Three-way comparison outcome, usable directly with ``cmp_to_key``."""

    LESSER = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: int, right: int) -> Ordering:
        if left > right:
            return cls.GREATER
        if left < right:
            return cls.LESSER
        return cls.EQUAL


class RankTier(IntEnum):
    """Lenient ordering tiers, lowest to highest."""

    INVALID = 0
    EMPTY = 1
    NUMBER = 2


class InvalidReason(StrEnum):
    """Why a string failed to parse as an unsigned binary integer."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    BAD_DIGIT = "bad_digit"
