"""JSON response type (application/json)."""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from responsewriter.core.envelope import ErrorDescriptor
from responsewriter.formats.base import BaseResponseType


@runtime_checkable
class JSONSerializable(Protocol):
    """Value that renders its own JSON text."""

    def to_json(self) -> str | bytes:
        ...


class JSONType(BaseResponseType):
    """Renders bodies with json.dumps (compact separators). Default error: {"code":500,"description":"Internal Server Error"}."""

    accepted_type = "application/json"
    content_type = "application/json"

    def serializes(self, value: Any) -> bool:
        return isinstance(value, JSONSerializable)

    def serialize(self, value: Any) -> bytes:
        out = value.to_json()
        return out.encode("utf-8") if isinstance(out, str) else bytes(out)

    def render(self, body: Any) -> bytes:
        if self.serializes(body):
            return self.serialize(body)
        return json.dumps(
            body,
            default=self._encode_default,
            separators=(",", ":"),
            allow_nan=False,
        ).encode("utf-8")

    def _encode_default(self, value: Any) -> Any:
        if isinstance(value, ErrorDescriptor):
            return value.to_dict()
        if self.serializes(value):
            return json.loads(self.serialize(value))
        if isinstance(value, Mapping):
            return dict(value)
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
