"""Domain layer — parsing, comparison, and value types.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""

from binparse.domain.binary import (
    INVALID,
    MAX_SAFE_INTEGER,
    MAX_SIGNIFICANT_BITS,
    ParsedValue,
    diagnose,
    is_binary_string,
    parse_unsigned_binary,
    significant_bits,
    to_number,
)
from binparse.domain.compare import (
    compare_lenient,
    compare_strict,
    lenient_sort_key,
    rank_tier,
    sort_lenient,
)
from binparse.domain.types import InvalidReason, Ordering, RankTier

__all__ = [
    "INVALID",
    "MAX_SAFE_INTEGER",
    "MAX_SIGNIFICANT_BITS",
    "InvalidReason",
    "Ordering",
    "ParsedValue",
    "RankTier",
    "compare_lenient",
    "compare_strict",
    "diagnose",
    "is_binary_string",
    "lenient_sort_key",
    "parse_unsigned_binary",
    "rank_tier",
    "significant_bits",
    "sort_lenient",
    "to_number",
]
