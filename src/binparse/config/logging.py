"""Log routing for the ``binparse`` logger tree.

Services log through plain ``logging.getLogger(__name__)``; this module
gives that tree a single stderr handler whose records are rendered by
structlog, either as colored console lines or as JSON lines
(``--log-json``).  Other libraries' loggers are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "binparse"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install the stderr handler on the ``binparse`` logger.

    Args:
        verbose: Emit DEBUG records (timings, per-input parse results).
            When False, only WARNING and above.
        log_json: One JSON object per record instead of console lines.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer: structlog.types.Processor
    if log_json:
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
