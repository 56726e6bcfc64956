"""Request handed to business callbacks: framework request plus route parameters."""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


class RequestContext:
    """Wraps the framework request (Starlette or any object with .headers) and the route parameters."""

    def __init__(
        self,
        request: Any,
        params: Mapping[str, Any] | None = None,
        *,
        body: bytes = b"",
    ) -> None:
        self.request = request
        self.params = dict(params or {})
        self.body = body

    def param(self, name: str, default: str = "") -> Any:
        """Route parameter by name; default when the route has no such parameter."""
        return self.params.get(name, default)

    @property
    def headers(self) -> Mapping[str, str]:
        return getattr(self.request, "headers", None) or {}

    @property
    def method(self) -> str:
        return getattr(self.request, "method", "")

    def header(self, name: str, default: str = "") -> str:
        headers = self.headers
        value = headers.get(name)
        if value is None:
            value = headers.get(name.lower())
        return default if value is None else value

    def json(self) -> Any:
        """Request body decoded as JSON; empty body gives {}."""
        return json.loads(self.body) if self.body else {}
