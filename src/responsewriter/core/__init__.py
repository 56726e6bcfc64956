from responsewriter.core.config import ResponseConfig
from responsewriter.core.converter import UNCONVERTIBLE, convert
from responsewriter.core.dispatcher import ResponseHandler
from responsewriter.core.envelope import Envelope, ErrorDescriptor, error_response
from responsewriter.core.errors import ConfigurationError, ResponseWriterError
from responsewriter.core.registry import TypeRegistry
from responsewriter.core.request import RequestContext
from responsewriter.core.status import code_to_log_level, code_to_status
from responsewriter.core.transport import BufferedTransport, Transport

__all__ = [
    "ResponseConfig",
    "UNCONVERTIBLE",
    "convert",
    "ResponseHandler",
    "Envelope",
    "ErrorDescriptor",
    "error_response",
    "ConfigurationError",
    "ResponseWriterError",
    "TypeRegistry",
    "RequestContext",
    "code_to_log_level",
    "code_to_status",
    "BufferedTransport",
    "Transport",
]
