"""
responsewriter — turn whatever a route callback returns into an HTTP response.
The response type is negotiated from the Accept header against the route's registered types.
"""
from responsewriter.core import (
    UNCONVERTIBLE,
    BufferedTransport,
    ConfigurationError,
    Envelope,
    ErrorDescriptor,
    RequestContext,
    ResponseConfig,
    ResponseHandler,
    ResponseWriterError,
    Transport,
    TypeRegistry,
    code_to_log_level,
    code_to_status,
    convert,
    error_response,
)
from responsewriter.core.logging import TRACE, configure_logging
from responsewriter.formats import JSONType, PlainTextType
from responsewriter.routing import ResponseModule, create_app, endpoint

__all__ = [
    "UNCONVERTIBLE",
    "BufferedTransport",
    "ConfigurationError",
    "Envelope",
    "ErrorDescriptor",
    "RequestContext",
    "ResponseConfig",
    "ResponseHandler",
    "ResponseWriterError",
    "Transport",
    "TypeRegistry",
    "code_to_log_level",
    "code_to_status",
    "convert",
    "error_response",
    "TRACE",
    "configure_logging",
    "JSONType",
    "PlainTextType",
    "ResponseModule",
    "create_app",
    "endpoint",
]
