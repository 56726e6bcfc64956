"""Errors raised by responsewriter. Per-request failures never raise; only setup does."""


class ResponseWriterError(Exception):
    """Base error for responsewriter."""


class ConfigurationError(ResponseWriterError):
    """Route set up with an unusable response type. Fatal: fix the route definition, do not retry."""
