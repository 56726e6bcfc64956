"""ResponseHandler: negotiate a response type, run the callback, convert its result and write it out."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from responsewriter.core.capabilities import EnvelopeLike
from responsewriter.core.config import ResponseConfig
from responsewriter.core.converter import UNCONVERTIBLE
from responsewriter.core.logging import log_with_fields
from responsewriter.core.registry import TypeRegistry
from responsewriter.core.request import RequestContext
from responsewriter.core.status import code_to_status
from responsewriter.core.transport import Transport
from responsewriter.formats.base import ResponseType

log = logging.getLogger(__name__)

Callback = Callable[[RequestContext], Any]


class ResponseHandler:
    """
    One route's response pipeline. Built once at setup (a bad preferred type raises ConfigurationError),
    then called once per request with the transport, the framework request and the route parameters.
    """

    def __init__(
        self,
        callback: Callback,
        preferred: ResponseType | None,
        *allowed: ResponseType,
        config: ResponseConfig | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.callback = callback
        self.registry = TypeRegistry(preferred, allowed)
        self.config = config or getattr(preferred, "config", None) or ResponseConfig()
        self.logger = logger or log

    def negotiate(self, context: RequestContext) -> ResponseType:
        return self.registry.select(context.header(self.config.negotiation_header))

    def __call__(
        self,
        transport: Transport,
        request: Any,
        params: Mapping[str, Any] | None = None,
        *,
        body: bytes = b"",
    ) -> None:
        context = RequestContext(request, params, body=body)
        response_type = self.negotiate(context)

        result = self.callback(context)

        response = response_type.convert(result)
        if response is UNCONVERTIBLE:
            response = result if isinstance(result, EnvelopeLike) else response_type.default_error()

        code, data = response.handle()

        if data is not None:
            content_type = response.get_content_type() or self.config.fallback_content_type
            transport.set_header("Content-Type", content_type)
        elif code == 200:
            code = 204

        transport.write_status(code)

        if data is None:
            return

        try:
            transport.write(data)
        except OSError as e:
            # status line is already out, nothing left to report to the client
            log_with_fields(
                self.logger,
                logging.ERROR,
                "Failed to write response body",
                {"code": code, "status": code_to_status(code)},
                exc_info=e,
            )
