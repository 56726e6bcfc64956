"""Envelope: a response that has not been sent yet. ErrorDescriptor: the generic error body."""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from responsewriter.core.logging import log_with_fields
from responsewriter.core.status import UNKNOWN_STATUS, code_to_log_level, code_to_status

if TYPE_CHECKING:
    from responsewriter.formats.base import ResponseType

logger = logging.getLogger(__name__)

Sink = Union[logging.Logger, logging.LoggerAdapter]


@dataclass(frozen=True)
class ErrorDescriptor:
    """Generic error body: {"code": ..., "description": ...}. The cause is kept for logging only."""

    code: int
    description: Any = None
    cause: Exception | None = field(default=None, compare=False, repr=False)

    def get_code(self) -> int:
        return self.code

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "description": self.description}


@dataclass
class Envelope:
    """
    Status code + body + optional cause and log sink, bound to the response type that renders it.
    code 0 means "not decided yet"; body None means "no body at all" (as opposed to b"").
    """

    response_type: ResponseType
    code: int = 0
    body: Any = None
    cause: Exception | None = None
    sink: Sink | None = None

    def replace(self, **changes: Any) -> Envelope:
        """Copy with the given fields changed. The original is left untouched."""
        return dataclasses.replace(self, **changes)

    def get_code(self) -> int:
        return self.code

    def get_content_type(self) -> str:
        return self.response_type.content_type

    def get_body(self) -> bytes:
        """Body as wire bytes. Falls back to the default error body when rendering fails."""
        body = self.body
        if body is None:
            return b""
        if isinstance(body, bytes):
            return body
        if isinstance(body, bytearray):
            return bytes(body)
        if isinstance(body, str):
            return body.encode("utf-8")
        try:
            return self.response_type.render(body)
        except Exception:
            (self.sink or logger).warning(
                "Failed to render %s response body",
                self.response_type.accepted_type,
                exc_info=True,
            )
            return self.response_type.default_error_bytes

    def handle(self) -> tuple[int, bytes | None]:
        """Resolve the final (code, body). body is None when nothing should be written."""
        code = self.code
        body = None if self.body is None else self.get_body()
        default_error_bytes = self.response_type.default_error_bytes

        if code == 0 and not body:
            code = 500
            body = default_error_bytes
        elif body == default_error_bytes:
            # the generic error body always goes out as a 500
            code = 500
        elif code == 0:
            code = 200

        if self.cause is not None and self.sink is not None:
            level = code_to_log_level(code)
            log_with_fields(
                self.sink,
                level,
                "Response error encountered",
                {
                    "code": code,
                    "status": code_to_status(code),
                    "severity": logging.getLevelName(level),
                },
                exc_info=self.cause,
            )

        return code, body


def error_response(
    response_type: ResponseType,
    code: int,
    description: Any = None,
    cause: Exception | None = None,
    *,
    sink: Sink | None = None,
) -> Envelope:
    """
    Envelope with an ErrorDescriptor body.
    Without a description the standard reason phrase is used when the code has one.
    """
    if description is None:
        status = code_to_status(code)
        if status != UNKNOWN_STATUS:
            description = status
    return Envelope(
        response_type,
        code,
        ErrorDescriptor(code, description, cause),
        cause=cause,
        sink=sink,
    )
