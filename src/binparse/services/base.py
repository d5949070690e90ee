"""BaseService — shared foundation for binparse services.

Every service receives the unified :class:`BinparseSettings` at
construction time so operations can read their config sections
(``[parsing]``, ``[selftest]``) without touching global state.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from binparse.config.settings import BinparseSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ConvertService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: BinparseSettings | None = None) -> None:
        if settings is None:
            from binparse.config.settings import BinparseSettings

            settings = BinparseSettings()
        self._settings = settings

    @property
    def settings(self) -> BinparseSettings:
        return self._settings

    @contextmanager
    def _timed(self, op: str, meta: dict[str, Any]) -> Generator[None]:
        """Record the wall time of the wrapped block into *meta*."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            meta["duration_ms"] = round(elapsed, 2)
            logger.debug("%s finished in %.2f ms", op, elapsed)
