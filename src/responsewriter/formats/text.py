"""Plain text response type (text/plain)."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from responsewriter.core.envelope import ErrorDescriptor
from responsewriter.core.status import code_to_status
from responsewriter.formats.base import BaseResponseType


@runtime_checkable
class TextSerializable(Protocol):
    """Value that renders its own plain text."""

    def to_text(self) -> str:
        ...


class PlainTextType(BaseResponseType):
    """
    UTF-8 text. Errors render as "<code> <description>", mappings as "key: value" lines,
    sequences one item per line. Default error: "500 Internal Server Error".
    """

    accepted_type = "text/plain"
    content_type = "text/plain; charset=utf-8"

    def serializes(self, value: Any) -> bool:
        return isinstance(value, TextSerializable)

    def serialize(self, value: Any) -> bytes:
        return value.to_text().encode("utf-8")

    def render(self, body: Any) -> bytes:
        return self._text(body).encode("utf-8")

    def _text(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8")
        if self.serializes(value):
            return value.to_text()
        if isinstance(value, ErrorDescriptor):
            description = value.description
            if description is None:
                description = code_to_status(value.code)
            return f"{value.code} {self._text(description)}"
        if isinstance(value, Mapping):
            return "\n".join(f"{key}: {self._text(item)}" for key, item in value.items())
        if isinstance(value, (list, tuple)):
            return "\n".join(self._text(item) for item in value)
        if isinstance(value, (int, float)):
            return str(value)
        raise TypeError(f"Object of type {type(value).__name__} has no plain text rendering")
