"""Starlette glue: run a ResponseHandler as an endpoint; group routes into a module."""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from responsewriter.core.config import ResponseConfig
from responsewriter.core.dispatcher import Callback, ResponseHandler
from responsewriter.core.module import Module
from responsewriter.core.transport import BufferedTransport
from responsewriter.formats.base import ResponseType


def endpoint(handler: ResponseHandler) -> Callable[[Request], Awaitable[Response]]:
    """Starlette endpoint for handler. The handler and callback run in the thread pool."""

    async def run(request: Request) -> Response:
        body = await request.body()
        transport = BufferedTransport()
        await run_in_threadpool(handler, transport, request, request.path_params, body=body)
        return transport.to_response()

    return run


class ResponseModule(Module):
    """
    Routes of one context: name + prefix + routes.
    Attach via module.register_into(app) or Starlette(routes=module.routes()).
    """

    def __init__(self, name: str, prefix: str | None = None) -> None:
        self.name = name
        self.prefix = prefix or f"/{name}"
        self._routes: list[tuple[str, ResponseHandler, list[str]]] = []

    def route(
        self,
        path: str,
        callback: Callback,
        preferred: ResponseType,
        *allowed: ResponseType,
        methods: list[str] | None = None,
        config: ResponseConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> ResponseModule:
        """Add a route. path without leading slash is under the module prefix. Bad response types fail here."""
        if methods is None:
            methods = ["GET"]
        p = path if path.startswith("/") else f"/{path}"
        handler = ResponseHandler(callback, preferred, *allowed, config=config, logger=logger)
        self._routes.append((p, handler, methods))
        return self

    def routes(self) -> list[Route]:
        return [
            Route(self.prefix.rstrip("/") + path, endpoint(handler), methods=methods)
            for path, handler, methods in self._routes
        ]

    def register_into(self, app: Starlette) -> None:
        app.router.routes.extend(self.routes())


def create_app(*modules: Module, **kwargs: Any) -> Starlette:
    """Starlette app with every module registered."""
    app = Starlette(**kwargs)
    for module in modules:
        module.register_into(app)
    return app
