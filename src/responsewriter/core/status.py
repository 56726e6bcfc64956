"""Status code helpers: log level bucket and reason phrase for a code."""
from __future__ import annotations

import logging
from http import HTTPStatus

from responsewriter.core.logging import TRACE

UNKNOWN_STATUS = "Unknown error"


def code_to_log_level(code: int) -> int:
    """Log level for a response code. Codes outside 200-599 are not real responses and log at TRACE."""
    if code < 200:
        return TRACE
    if code < 300:
        return logging.DEBUG
    if code < 400:
        return logging.INFO
    if code < 500:
        return logging.WARNING
    if code < 600:
        return logging.ERROR
    return TRACE


def code_to_status(code: int) -> str:
    if code <= 0 or code >= 600:
        return UNKNOWN_STATUS
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return UNKNOWN_STATUS
