"""ConvertService — parse, compare, and sort binary strings.

Wraps the pure domain functions in ServiceResult envelopes.  Soft
failures (invalid digit strings, incomparable pairs) become
``ok=False`` results with a structured error; they are never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from binparse.domain.binary import (
    MAX_SIGNIFICANT_BITS,
    diagnose,
    parse_unsigned_binary,
    significant_bits,
)
from binparse.domain.compare import (
    compare_lenient,
    compare_strict,
    rank_tier,
    sort_lenient,
)
from binparse.domain.types import InvalidReason
from binparse.services.base import BaseService
from binparse.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

COMPARE_MODES: tuple[str, ...] = ("strict", "lenient")


def _invalid_message(text: str, reason: InvalidReason, index: int | None) -> str:
    if reason is InvalidReason.EMPTY:
        return "Empty string is not a binary number"
    if reason is InvalidReason.TOO_LONG:
        return (
            f"More than {MAX_SIGNIFICANT_BITS} significant bits "
            f"({significant_bits(text)}) exceeds the safe integer bound"
        )
    assert index is not None
    return f"Invalid binary digit {text[index]!r} at index {index}"


class ConvertService(BaseService):
    """Parsing and comparison operations over binary strings."""

    def _prepare(self, text: str) -> str:
        if self.settings.parsing.strip_whitespace:
            return text.strip()
        return text

    def _describe(self, text: str) -> dict[str, Any]:
        parsed = parse_unsigned_binary(text)
        item: dict[str, Any] = {
            "input": text,
            "valid": parsed.is_valid,
            "value": parsed.value,
            "significant_bits": significant_bits(text),
        }
        if not parsed.is_valid:
            diagnosis = diagnose(text)
            assert diagnosis is not None
            reason, index = diagnosis
            item["reason"] = str(reason)
            if index is not None:
                item["index"] = index
        return item

    def parse(self, text: str) -> ServiceResult:
        """Parse a single binary string."""
        text = self._prepare(text)
        item = self._describe(text)
        logger.debug("parse %r -> %s", text, item["value"])

        if item["valid"]:
            return ServiceResult(ok=True, op="parse", data=item)

        reason = InvalidReason(item["reason"])
        index = item.get("index")
        detail: dict[str, Any] = {"input": text, "reason": str(reason)}
        if index is not None:
            detail["index"] = index
        return ServiceResult(
            ok=False,
            op="parse",
            data=item,
            error=ServiceError(
                code="INVALID_BINARY",
                message=_invalid_message(text, reason, index),
                detail=detail,
            ),
        )

    def parse_many(self, texts: Iterable[str]) -> ServiceResult:
        """Parse several strings; invalid inputs become warnings."""
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        meta: dict[str, Any] = {}

        with self._timed("parse_many", meta):
            for text in texts:
                text = self._prepare(text)
                item = self._describe(text)
                items.append(item)
                if not item["valid"]:
                    reason = InvalidReason(item["reason"])
                    msg = _invalid_message(text, reason, item.get("index"))
                    warnings.append(f"{text!r}: {msg}")

        valid_count = sum(1 for item in items if item["valid"])
        return ServiceResult(
            ok=True,
            op="parse_many",
            data={
                "items": items,
                "count": len(items),
                "valid_count": valid_count,
                "invalid_count": len(items) - valid_count,
            },
            warnings=warnings,
            meta=meta,
        )

    def compare(self, first: str, second: str, *, mode: str = "strict") -> ServiceResult:
        """Compare two strings strictly (numeric only) or leniently (ranked)."""
        if mode not in COMPARE_MODES:
            return ServiceResult(
                ok=False,
                op="compare",
                error=ServiceError(
                    code="INVALID_MODE",
                    message=f"Unknown compare mode {mode!r}",
                    detail={"mode": mode, "allowed": list(COMPARE_MODES)},
                ),
            )

        first = self._prepare(first)
        second = self._prepare(second)
        data: dict[str, Any] = {
            "a": first,
            "b": second,
            "mode": mode,
            "a_value": parse_unsigned_binary(first).value,
            "b_value": parse_unsigned_binary(second).value,
        }

        if mode == "lenient":
            ordering = compare_lenient(first, second)
            data["a_tier"] = rank_tier(first).name.lower()
            data["b_tier"] = rank_tier(second).name.lower()
            data["result"] = int(ordering)
            return ServiceResult(ok=True, op="compare", data=data)

        strict = compare_strict(first, second)
        if strict is None:
            data["result"] = None
            invalid = [s for s in (first, second) if not parse_unsigned_binary(s).is_valid]
            return ServiceResult(
                ok=False,
                op="compare",
                data=data,
                error=ServiceError(
                    code="INCOMPARABLE",
                    message="Both strings must be valid binary numbers for strict comparison",
                    detail={"invalid": invalid},
                ),
            )
        data["result"] = int(strict)
        return ServiceResult(ok=True, op="compare", data=data)

    def sort(self, texts: Iterable[str], *, reverse: bool = False) -> ServiceResult:
        """Sort strings in lenient order (invalid < empty < numbers)."""
        ordered = sort_lenient((self._prepare(t) for t in texts), reverse=reverse)

        items: list[dict[str, Any]] = []
        for text in ordered:
            tier = rank_tier(text)
            items.append(
                {
                    "input": text,
                    "tier": tier.name.lower(),
                    "value": parse_unsigned_binary(text).value,
                }
            )
        logger.debug("sorted %d strings (reverse=%s)", len(items), reverse)
        return ServiceResult(
            ok=True,
            op="sort",
            data={"items": items, "count": len(items), "reverse": reverse},
        )
