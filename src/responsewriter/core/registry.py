"""Media type -> response type lookup for one route. Built at setup, read-only afterwards."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from responsewriter.core.errors import ConfigurationError
from responsewriter.formats.base import ResponseType


class TypeRegistry(Mapping[str, ResponseType]):
    """
    Allowed response types keyed by accepted media type.
    The preferred type is inserted last, so it wins a key collision with an allowed type.
    """

    def __init__(self, preferred: ResponseType | None, allowed: tuple[ResponseType, ...] = ()) -> None:
        if preferred is None:
            raise ConfigurationError("Invalid response type given for response handler")
        preferred_accepted = preferred.accepted_type
        if not preferred_accepted:
            raise ConfigurationError("Invalid accepted response type given")

        types: dict[str, ResponseType] = {}
        for allowed_type in allowed:
            if allowed_type is None:
                raise ConfigurationError("Invalid allowed response type given for response handler")
            types[allowed_type.accepted_type] = allowed_type
        types[preferred_accepted] = preferred

        self._preferred = preferred
        self._types = MappingProxyType(types)

    @classmethod
    def build(cls, preferred: ResponseType | None, *allowed: ResponseType) -> TypeRegistry:
        return cls(preferred, allowed)

    @property
    def preferred(self) -> ResponseType:
        return self._preferred

    def select(self, accepted: str | None) -> ResponseType:
        """Exact match on the negotiation header value; anything else gets the preferred type."""
        if accepted:
            selected = self._types.get(accepted)
            if selected is not None:
                return selected
        return self._preferred

    def __getitem__(self, accepted: str) -> ResponseType:
        return self._types[accepted]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
