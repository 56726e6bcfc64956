"""
Value -> Envelope conversion.

Rules are tried in order and the first match wins, so a value exposing several
capabilities is handled by the earliest one:

    None, self-describing, str, Envelope, ErrorDescriptor, status code int,
    exception, self-serializing, structured container.

Anything else is UNCONVERTIBLE and the caller picks a fallback.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Union

from responsewriter.core.capabilities import (
    Coded,
    SelfDescribing,
    is_error,
    is_status_code,
    is_structured,
)
from responsewriter.core.envelope import Envelope, ErrorDescriptor

if TYPE_CHECKING:
    from responsewriter.formats.base import ResponseType

logger = logging.getLogger(__name__)


class _Unconvertible:
    """Marker returned when no rule matches a value."""

    def __repr__(self) -> str:
        return "UNCONVERTIBLE"

    def __bool__(self) -> bool:
        return False


UNCONVERTIBLE = _Unconvertible()

Converted = Union[Envelope, _Unconvertible]


def convert(response_type: ResponseType, value: Any) -> Converted:
    """Turn a callback result into an Envelope for response_type, or UNCONVERTIBLE."""
    if value is None:
        return response_type.envelope(204)

    if isinstance(value, SelfDescribing):
        return value.to_envelope(response_type)

    if isinstance(value, str):
        if not value:
            return response_type.envelope(204)
        return response_type.envelope(200, value)

    if isinstance(value, Envelope):
        return value.replace()

    if isinstance(value, ErrorDescriptor):
        return response_type.envelope(value.code, value, cause=value.cause)

    if is_status_code(value):
        return response_type.envelope(int(value))

    if is_error(value):
        return _convert_error(response_type, value)

    if response_type.serializes(value):
        code = value.get_code() if isinstance(value, Coded) else 200
        try:
            return response_type.envelope(code, response_type.serialize(value))
        except Exception:
            logger.debug("Self-serialization failed for %s", type(value).__name__, exc_info=True)

    if is_structured(value):
        return response_type.envelope(200, value)

    return UNCONVERTIBLE


def _convert_error(response_type: ResponseType, error: Exception) -> Envelope:
    code = 500
    body: Any = response_type.default_error_descriptor()

    coded = isinstance(error, Coded)
    if coded:
        code = error.get_code()

    if response_type.serializes(error):
        # rendered when the envelope is handled
        body = error
    elif coded:
        body = ErrorDescriptor(code, response_type.config.describe_error(code, error), error)

    return response_type.envelope(code, body, cause=error)
