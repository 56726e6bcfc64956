"""
Capabilities a returned value may expose. Each is checked on its own;
converter.py decides the order in which they are consulted.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from responsewriter.core.envelope import Envelope
    from responsewriter.formats.base import ResponseType


@runtime_checkable
class SelfDescribing(Protocol):
    """Value that builds its own envelope for the negotiated response type."""

    def to_envelope(self, response_type: ResponseType) -> Envelope:
        ...


@runtime_checkable
class Coded(Protocol):
    """Value carrying its own HTTP status code."""

    def get_code(self) -> int:
        ...


@runtime_checkable
class EnvelopeLike(Protocol):
    """Anything the dispatcher can materialize and transmit directly."""

    def handle(self) -> tuple[int, bytes | None]:
        ...

    def get_content_type(self) -> str:
        ...


def is_error(value: Any) -> bool:
    return isinstance(value, Exception)


def is_status_code(value: Any) -> bool:
    # bool is an int subclass but never a status code
    return isinstance(value, int) and not isinstance(value, bool)


STRUCTURED_TYPES: tuple[type, ...] = (Mapping, list, tuple, bytes, bytearray)


def is_structured(value: Any) -> bool:
    """Containers rendered generically by the response type."""
    return isinstance(value, STRUCTURED_TYPES)
