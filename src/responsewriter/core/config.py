"""Response settings: one immutable object created at startup and handed to response types and handlers."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable

# (resolved code, error) -> description used in the generic error body
ErrorDescriber = Callable[[int, Exception], Any]


@dataclass(frozen=True)
class ResponseConfig:
    """
    Negotiation and fallback settings.
    Pass the same instance to every response type and ResponseHandler of an app.
    """

    negotiation_header: str = "Accept"
    fallback_content_type: str = "text/plain"
    default_error_description: Any = "Internal Server Error"
    error_description: ErrorDescriber | None = None

    def describe_error(self, code: int, error: Exception) -> Any:
        """Description for a coded error without its own rendering. Defaults to the generic text for every code."""
        if self.error_description is None:
            return self.default_error_description
        return self.error_description(code, error)

    @classmethod
    def load_from_env(cls, prefix: str = "RESPONSEWRITER_", **defaults: Any) -> ResponseConfig:
        """Build from os.environ with prefix and defaults, e.g. RESPONSEWRITER_NEGOTIATION_HEADER=X-Format."""
        values = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                if name in _ENV_FIELDS:
                    values[name] = value
        return cls(**values)


_ENV_FIELDS = {
    "negotiation_header",
    "fallback_content_type",
    "default_error_description",
}
