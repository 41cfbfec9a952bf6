"""Read-only container for computed location contexts."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from warpmap.locations.contracts import LocationContext


class ContextStore:
    """Mapping of location id to its :class:`LocationContext`.

    Built once by the context builder and never mutated afterwards; a world
    change means building a new store.
    """

    def __init__(self, contexts: Mapping[str, LocationContext] | None = None) -> None:
        self._contexts = MappingProxyType(dict(contexts or {}))

    def get(self, location_id: str | None) -> LocationContext | None:
        if not location_id:
            return None
        return self._contexts.get(location_id)

    def contains(self, location_id: str | None) -> bool:
        return bool(location_id) and location_id in self._contexts

    def ids(self) -> list[str]:
        return list(self._contexts)

    def items(self) -> Iterator[tuple[str, LocationContext]]:
        return iter(self._contexts.items())

    def to_payload(self) -> dict[str, Any]:
        return {
            location_id: context.model_dump(mode="json")
            for location_id, context in self._contexts.items()
        }

    def __contains__(self, location_id: object) -> bool:
        return isinstance(location_id, str) and self.contains(location_id)

    def __iter__(self) -> Iterator[str]:
        return iter(self._contexts)

    def __len__(self) -> int:
        return len(self._contexts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContextStore):
            return NotImplemented
        return dict(self._contexts) == dict(other._contexts)

    def __repr__(self) -> str:
        return f"ContextStore({len(self._contexts)} locations)"
