"""Shared fixtures: response types and a transport that records every call."""
from __future__ import annotations

import pytest

from responsewriter import JSONType, PlainTextType, ResponseConfig


class RecordingTransport:
    """Transport double: records calls in order; write() raises when fail_writes is set."""

    def __init__(self, fail_writes: bool = False) -> None:
        self.calls: list[tuple] = []
        self.fail_writes = fail_writes

    def set_header(self, key: str, value: str) -> None:
        self.calls.append(("set_header", key, value))

    def write_status(self, code: int) -> None:
        self.calls.append(("write_status", code))

    def write(self, data: bytes) -> int:
        self.calls.append(("write", data))
        if self.fail_writes:
            raise BrokenPipeError("client went away")
        return len(data)

    def named(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


class FakeRequest:
    def __init__(self, headers: dict[str, str] | None = None, method: str = "GET") -> None:
        self.headers = headers or {}
        self.method = method


@pytest.fixture
def config() -> ResponseConfig:
    return ResponseConfig()


@pytest.fixture
def json_type(config: ResponseConfig) -> JSONType:
    return JSONType(config)


@pytest.fixture
def text_type(config: ResponseConfig) -> PlainTextType:
    return PlainTextType(config)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
