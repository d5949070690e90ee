"""Unsigned binary string parsing.

A binary string is a ``str`` whose characters are each ``'0'`` or ``'1'``,
read most-significant bit first and always treated as unsigned.

INVARIANT: A valid parse never exceeds MAX_SAFE_INTEGER (2**53 - 1).
INVARIANT: Zero is a valid parse; only INVALID marks a failed parse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from binparse.domain.types import InvalidReason

MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# All-ones at this width is exactly MAX_SAFE_INTEGER, so for base 2 the
# length check is also an exact magnitude check.
MAX_SIGNIFICANT_BITS: Final[int] = 53

_ZERO: Final[str] = "0"
_ONE: Final[str] = "1"


@dataclass(frozen=True, slots=True)
class ParsedValue:
    """Tagged parse result: an integer, or the invalid marker.

    Attributes:
        value: The parsed integer, or None when the input is not a valid
            unsigned binary string within the safe bound.
    """

    value: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.value is not None

    def unwrap(self) -> int:
        """Return the parsed integer, raising ValueError when invalid."""
        if self.value is None:
            msg = "Cannot unwrap an invalid binary parse"
            raise ValueError(msg)
        return self.value


INVALID: Final[ParsedValue] = ParsedValue()


def _require_str(text: object) -> None:
    if not isinstance(text, str):
        msg = f"Not a string: expected str, got {type(text).__name__}"
        raise TypeError(msg)


def _first_significant(text: str) -> int:
    """Index of the first character that is not a leading zero."""
    start = 0
    length = len(text)
    while start < length and text[start] == _ZERO:
        start += 1
    return start


def parse_unsigned_binary(text: str) -> ParsedValue:
    """Parse *text* as an unsigned binary integer.

    Leading zeros are skipped before the length bound is applied, so
    ``"00001"`` parses like ``"1"``.  Returns INVALID for the empty string,
    for more than 53 significant digits, and on the first character that is
    not ``'0'`` or ``'1'``.

    Raises:
        TypeError: If *text* is not a ``str``.
    """
    _require_str(text)
    if not text:
        return INVALID

    start = _first_significant(text)
    if len(text) - start > MAX_SIGNIFICANT_BITS:
        return INVALID

    out = 0
    for ch in text[start:]:
        if ch == _ZERO:
            out *= 2
        elif ch == _ONE:
            out = out * 2 + 1
        else:
            return INVALID
    return ParsedValue(out)


def to_number(text: str) -> int | None:
    """Parse *text* and return the integer, or None when invalid."""
    return parse_unsigned_binary(text).value


def is_binary_string(text: str) -> bool:
    """Check whether *text* parses to a value within the safe bound."""
    return parse_unsigned_binary(text).is_valid


def diagnose(text: str) -> tuple[InvalidReason, int | None] | None:
    """Explain why *text* fails to parse.

    Returns None for valid input, otherwise ``(reason, index)`` where
    *index* is the position of the first bad character for
    ``InvalidReason.BAD_DIGIT`` and None for the other reasons.  Checks
    run in the same order as :func:`parse_unsigned_binary`.
    """
    _require_str(text)
    if not text:
        return InvalidReason.EMPTY, None

    start = _first_significant(text)
    if len(text) - start > MAX_SIGNIFICANT_BITS:
        return InvalidReason.TOO_LONG, None

    for index in range(start, len(text)):
        if text[index] not in (_ZERO, _ONE):
            return InvalidReason.BAD_DIGIT, index
    return None


def significant_bits(text: str) -> int:
    """Number of digits left after stripping leading zeros."""
    _require_str(text)
    return len(text) - _first_significant(text)
