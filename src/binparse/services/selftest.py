"""SelfTestService — randomized verification against a reference parser.

Generates random binary strings and checks the domain parser and both
comparators against Python's own ``int(text, 2)``.  Fixed edge cases
(empty input, neighbouring characters, sign prefixes, the 53-bit bound)
run alongside the random cases.

Every run records its seed so a failing run can be replayed exactly.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from binparse.domain.binary import (
    MAX_SAFE_INTEGER,
    MAX_SIGNIFICANT_BITS,
    parse_unsigned_binary,
)
from binparse.domain.compare import compare_lenient, compare_strict
from binparse.domain.types import Ordering
from binparse.services.base import BaseService
from binparse.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

# Characters just outside the digit range plus common number syntax that
# int() would accept but a strict binary parser must not.
INVALID_SAMPLES: tuple[str, ...] = (
    "",
    "/",
    "2",
    "`",
    "a",
    "z",
    "@",
    "A",
    "Z",
    "+0",
    "-0",
    "-1",
    " 1",
    "1 ",
    "0b1",
    "1_0",
    "１",
)

NON_STRING_SAMPLES: tuple[Any, ...] = (123, 0, None, b"101", 1.0, ["1"])


def reference_value(text: str) -> int | None:
    """Reference parse for strings made only of ``'0'`` and ``'1'``."""
    value = int(text, 2)
    return value if value <= MAX_SAFE_INTEGER else None


def _reference_order(v1: int | None, v2: int | None) -> Ordering | None:
    if v1 is None or v2 is None:
        return None
    return Ordering.of(v1, v2)


def _reference_lenient(v1: int | None, v2: int | None) -> Ordering:
    # Random samples are never empty, so a None value is the invalid tier.
    k1 = (2, v1) if v1 is not None else (0, 0)
    k2 = (2, v2) if v2 is not None else (0, 0)
    if k1 > k2:
        return Ordering.GREATER
    if k1 < k2:
        return Ordering.LESSER
    return Ordering.EQUAL


@dataclass
class CheckOutcome:
    """Tally for one named check."""

    name: str
    cases: int = 0
    failures: int = 0
    first_failure: str | None = None

    @property
    def passed(self) -> bool:
        return self.failures == 0

    def record(self, ok: bool, describe: Callable[[], str]) -> None:
        self.cases += 1
        if ok:
            return
        self.failures += 1
        if self.first_failure is None:
            self.first_failure = describe()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "cases": self.cases,
            "failures": self.failures,
            "first_failure": self.first_failure,
        }


def random_binary_strings(rng: random.Random, count: int, max_length: int) -> list[str]:
    """Generate *count* strings of ``'0'``/``'1'`` with lengths 1..max_length.

    Leading zeros are kept, so padded inputs are exercised too.
    """
    out: list[str] = []
    for _ in range(count):
        length = rng.randint(1, max_length)
        out.append(format(rng.getrandbits(length), f"0{length}b"))
    return out


class SelfTestService(BaseService):
    """Randomized and fixed-case verification of the parser and comparators."""

    def run(
        self,
        *,
        cases: int | None = None,
        seed: int | None = None,
        max_length: int | None = None,
    ) -> ServiceResult:
        """Run every check and summarize the outcome."""
        cfg = self.settings.selftest
        cases = cfg.cases if cases is None else cases
        max_length = cfg.max_length if max_length is None else max_length
        if seed is None:
            seed = cfg.seed
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)

        if cases < 1 or max_length < 1:
            return ServiceResult(
                ok=False,
                op="selftest",
                error=ServiceError(
                    code="INVALID_ARGUMENT",
                    message="cases and max_length must be positive",
                    detail={"cases": cases, "max_length": max_length},
                ),
            )

        rng = random.Random(seed)
        meta: dict[str, Any] = {}
        logger.debug("selftest seed=%d cases=%d max_length=%d", seed, cases, max_length)

        with self._timed("selftest", meta):
            samples = random_binary_strings(rng, cases, max_length)
            outcomes = [
                self._check_parse_random(samples, rng),
                self._check_parse_invalid(),
                self._check_bounds(),
                self._check_compare_strict(samples),
                self._check_compare_lenient(samples),
            ]

        for outcome in outcomes:
            if not outcome.passed:
                logger.warning(
                    "selftest check %s failed %d/%d: %s",
                    outcome.name,
                    outcome.failures,
                    outcome.cases,
                    outcome.first_failure,
                )

        passed = all(o.passed for o in outcomes)
        data = {
            "cases": cases,
            "seed": seed,
            "max_length": max_length,
            "checks": [o.to_dict() for o in outcomes],
            "passed": passed,
        }
        if passed:
            return ServiceResult(ok=True, op="selftest", data=data, meta=meta)

        failed = [o.name for o in outcomes if not o.passed]
        return ServiceResult(
            ok=False,
            op="selftest",
            data=data,
            meta=meta,
            error=ServiceError(
                code="SELFTEST_FAILED",
                message=f"{len(failed)} check(s) failed: {', '.join(failed)}",
                detail={"failed": failed, "seed": seed},
            ),
        )

    # ── Checks ────────────────────────────────────────────────────────

    def _check_parse_random(self, samples: list[str], rng: random.Random) -> CheckOutcome:
        outcome = CheckOutcome("parse_random")
        for text in samples:
            expected = reference_value(text)
            got = parse_unsigned_binary(text).value
            outcome.record(got == expected, lambda t=text, g=got, e=expected: f"{t!r}: {g} != {e}")

            padded = "0" * rng.randint(1, 8) + text
            got_padded = parse_unsigned_binary(padded).value
            outcome.record(
                got_padded == expected,
                lambda t=padded, g=got_padded, e=expected: f"{t!r}: {g} != {e}",
            )
        return outcome

    def _check_parse_invalid(self) -> CheckOutcome:
        outcome = CheckOutcome("parse_invalid")
        for text in INVALID_SAMPLES:
            parsed = parse_unsigned_binary(text)
            outcome.record(
                not parsed.is_valid,
                lambda t=text, p=parsed: f"{t!r} parsed to {p.value}",
            )
        for value in NON_STRING_SAMPLES:
            try:
                parse_unsigned_binary(value)
            except TypeError:
                outcome.record(True, str)
            else:
                outcome.record(False, lambda v=value: f"{v!r} did not raise TypeError")
        return outcome

    def _check_bounds(self) -> CheckOutcome:
        outcome = CheckOutcome("bounds")
        width = MAX_SIGNIFICANT_BITS
        expectations: list[tuple[str, int | None]] = [
            ("1" * width, MAX_SAFE_INTEGER),
            ("0" * 100 + "1" * width, MAX_SAFE_INTEGER),
            ("1" + "0" * width, None),
            ("1" * (width + 1), None),
            ("1" * width + "0", None),
            ("0" * 1000, 0),
            ("0", 0),
            ("1", 1),
        ]
        for text, expected in expectations:
            got = parse_unsigned_binary(text).value
            outcome.record(
                got == expected,
                lambda t=text, g=got, e=expected: f"len {len(t)}: {g} != {e}",
            )
        return outcome

    def _check_compare_strict(self, samples: list[str]) -> CheckOutcome:
        outcome = CheckOutcome("compare_strict")
        for s1, s2 in zip(samples[0::2], samples[1::2], strict=False):
            expected = _reference_order(reference_value(s1), reference_value(s2))
            got = compare_strict(s1, s2)
            outcome.record(got == expected, lambda a=s1, b=s2, g=got: f"({a!r}, {b!r}) -> {g}")

        fixed: list[tuple[str, str, Ordering | None]] = [
            ("0", "00000", Ordering.EQUAL),
            ("", "000", None),
            ("000", "", None),
            ("0", "-000", None),
            ("-000", "0", None),
            ("", "", None),
        ]
        for s1, s2, expected in fixed:
            got = compare_strict(s1, s2)
            outcome.record(got == expected, lambda a=s1, b=s2, g=got: f"({a!r}, {b!r}) -> {g}")
        return outcome

    def _check_compare_lenient(self, samples: list[str]) -> CheckOutcome:
        outcome = CheckOutcome("compare_lenient")
        for s1, s2 in zip(samples[0::2], samples[1::2], strict=False):
            expected = _reference_lenient(reference_value(s1), reference_value(s2))
            got = compare_lenient(s1, s2)
            outcome.record(got == expected, lambda a=s1, b=s2, g=got: f"({a!r}, {b!r}) -> {g}")

        fixed: list[tuple[str, str, Ordering]] = [
            ("0", "00000", Ordering.EQUAL),
            ("`", "", Ordering.LESSER),
            ("`", "0", Ordering.LESSER),
            ("`", "`", Ordering.EQUAL),
            ("`", "x", Ordering.EQUAL),
            ("", "`", Ordering.GREATER),
            ("0", "`", Ordering.GREATER),
            ("", "0", Ordering.LESSER),
            ("", "", Ordering.EQUAL),
            ("0", "", Ordering.GREATER),
        ]
        for s1, s2, expected in fixed:
            got = compare_lenient(s1, s2)
            outcome.record(got == expected, lambda a=s1, b=s2, g=got: f"({a!r}, {b!r}) -> {g}")
        return outcome
