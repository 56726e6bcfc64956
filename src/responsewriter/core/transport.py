"""Transport protocol the dispatcher writes to, and an in-memory transport that becomes a Starlette response."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from starlette.responses import Response


@runtime_checkable
class Transport(Protocol):
    """Outgoing side of one request. write() raises OSError when the peer is gone."""

    def set_header(self, key: str, value: str) -> None:
        ...

    def write_status(self, code: int) -> None:
        ...

    def write(self, data: bytes) -> int:
        ...


class BufferedTransport:
    """Records headers, status line and body writes; to_response() builds the Starlette response."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status_code: int | None = None
        self.writes: list[bytes] = []

    def set_header(self, key: str, value: str) -> None:
        if self.status_code is not None:
            raise RuntimeError("Headers already sent")
        self.headers[key] = value

    def write_status(self, code: int) -> None:
        if self.status_code is not None:
            raise RuntimeError(f"Status line already sent ({self.status_code})")
        self.status_code = code

    def write(self, data: bytes) -> int:
        if self.status_code is None:
            self.write_status(200)
        self.writes.append(bytes(data))
        return len(data)

    @property
    def body(self) -> bytes:
        return b"".join(self.writes)

    def to_response(self) -> Response:
        return Response(
            content=self.body,
            status_code=self.status_code or 200,
            headers=self.headers,
        )
