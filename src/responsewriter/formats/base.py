"""ResponseType protocol and the shared part of the concrete formats."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from responsewriter.core.config import ResponseConfig
from responsewriter.core.converter import Converted, convert
from responsewriter.core.envelope import Envelope, ErrorDescriptor, Sink


@runtime_checkable
class ResponseType(Protocol):
    """
    A negotiable body format, keyed by the media type clients send in the negotiation header.
    Instances are built once at startup and shared by every request.
    """

    accepted_type: str
    content_type: str
    config: ResponseConfig

    @property
    def default_error_bytes(self) -> bytes:
        ...

    def convert(self, value: Any) -> Converted:
        ...

    def default_error(self) -> Envelope:
        ...

    def default_error_descriptor(self) -> ErrorDescriptor:
        ...

    def envelope(
        self,
        code: int = 0,
        body: Any = None,
        *,
        cause: Exception | None = None,
        sink: Sink | None = None,
    ) -> Envelope:
        ...

    def serializes(self, value: Any) -> bool:
        ...

    def serialize(self, value: Any) -> bytes:
        ...

    def render(self, body: Any) -> bytes:
        ...


class BaseResponseType:
    """
    Conversion, envelopes and the cached default error body.
    Subclasses set accepted_type/content_type and implement serializes, serialize and render.
    """

    accepted_type: str = ""
    content_type: str = ""

    def __init__(self, config: ResponseConfig | None = None) -> None:
        self.config = config or ResponseConfig()
        self._default_error_bytes = self.render(self.default_error_descriptor())

    @property
    def default_error_bytes(self) -> bytes:
        """Rendered default error body. Computed once; also marks a body as "already an error"."""
        return self._default_error_bytes

    def convert(self, value: Any) -> Converted:
        return convert(self, value)

    def default_error(self) -> Envelope:
        return Envelope(self, 500, self._default_error_bytes)

    def default_error_descriptor(self) -> ErrorDescriptor:
        return ErrorDescriptor(500, self.config.default_error_description)

    def envelope(
        self,
        code: int = 0,
        body: Any = None,
        *,
        cause: Exception | None = None,
        sink: Sink | None = None,
    ) -> Envelope:
        """New envelope rendered by this type."""
        return Envelope(self, code, body, cause=cause, sink=sink)

    def serializes(self, value: Any) -> bool:
        raise NotImplementedError

    def serialize(self, value: Any) -> bytes:
        raise NotImplementedError

    def render(self, body: Any) -> bytes:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.accepted_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.accepted_type!r})"
