"""Module protocol: any object with register_into(app) can attach its routes to a Starlette app."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from starlette.applications import Starlette


@runtime_checkable
class Module(Protocol):
    """Building block: configured externally, attached via module.register_into(app)."""

    def register_into(self, app: Starlette) -> None:
        """Attach the module's routes to the app."""
        ...
