"""Result envelope returned by every binparse service operation.

INVARIANT: Soft failures (an invalid digit string, an incomparable pair,
a failed self-check) are returned as ``ok=False`` results, never raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    Attributes:
        code: Stable machine-readable code, e.g. ``INVALID_BINARY``.
        message: Human-readable summary.
        detail: Structured context such as the offending input and index.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: ``parse``, ``parse_many``, ``compare``, ``sort`` or ``selftest``.
        data: Operation payload.  Failed results still carry what was
            computed, e.g. the parse description of a rejected input.
        warnings: Per-input problems in batch operations.
        error: Structured error when ``ok`` is False.
        meta: Timing (``duration_ms``) for batch operations.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
