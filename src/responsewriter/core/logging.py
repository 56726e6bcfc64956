"""
Logging setup for responsewriter.

Library modules log through logging.getLogger(__name__); nothing is configured
on import. Applications call configure_logging() once at startup.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

TRACE = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.addLevelName(TRACE, "TRACE")


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging.

    Args:
        level: The log level name (TRACE, DEBUG, INFO, WARNING, ERROR).
    """
    name = level.upper()
    resolved = TRACE if name == "TRACE" else getattr(logging, name, logging.INFO)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )


def log_with_fields(
    sink: logging.Logger | logging.LoggerAdapter,
    level: int,
    msg: str,
    fields: dict[str, Any],
    exc_info: Any = None,
) -> None:
    """Log msg with fields as record attributes. Adapters keep their own extra; fields win on a clash."""
    if isinstance(sink, logging.LoggerAdapter):
        # process() replaces extra with the adapter's own, so merge by hand and log on the wrapped logger
        msg, kwargs = sink.process(msg, {"exc_info": exc_info})
        merged = {**(kwargs.get("extra") or {}), **fields}
        log_with_fields(sink.logger, level, msg, merged, exc_info=kwargs.get("exc_info"))
        return
    sink.log(level, msg, extra=fields, exc_info=exc_info)
