"""Read-only queries over a built context store."""

from __future__ import annotations

import re
from dataclasses import dataclass

from warpmap.locations.context_store import ContextStore
from warpmap.locations.contracts import LocationType

_LEVEL_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
_LEVEL_MIN = -(2**31)
_LEVEL_MAX = 2**31 - 1


@dataclass(frozen=True)
class SublevelNaming:
    """How numbered mine floors map onto canonical area names."""

    prefix: str = "UndergroundMine"
    deep_level_threshold: int = 120
    shallow_name: str = "Mine"
    deep_name: str = "SkullCave"

    def parse_level(self, location_id: str | None) -> int | None:
        if not location_id or not location_id.startswith(self.prefix):
            return None
        suffix = location_id[len(self.prefix) :]
        if not _LEVEL_PATTERN.fullmatch(suffix):
            return None
        level = int(suffix)
        if not _LEVEL_MIN <= level <= _LEVEL_MAX:
            return None
        return level


DEFAULT_SUBLEVEL_NAMING = SublevelNaming()


def get_mines_location_name(
    location_id: str | None, *, naming: SublevelNaming = DEFAULT_SUBLEVEL_NAMING
) -> str | None:
    level = naming.parse_level(location_id)
    if level is None:
        return None
    if level > naming.deep_level_threshold:
        return naming.deep_name
    return naming.shallow_name


def is_outdoors(store: ContextStore, location_id: str | None) -> bool:
    context = store.get(location_id)
    return context is not None and context.type == LocationType.OUTDOORS


def get_building(
    store: ContextStore,
    location_id: str | None,
    *,
    naming: SublevelNaming = DEFAULT_SUBLEVEL_NAMING,
) -> str | None:
    """Return the uppermost indoor location containing ``location_id``.

    Mine floors resolve to their canonical area name. A location hanging
    directly off its root with no building above it is its own container.
    A parent cycle stops at the first location seen twice.
    """
    if not location_id:
        return None
    seen: set[str] = set()
    current = location_id
    while True:
        if current in seen:
            return current
        seen.add(current)

        if naming.parse_level(current) is not None:
            return get_mines_location_name(current, naming=naming)

        context = store.get(current)
        if context is None:
            return None
        if context.type == LocationType.BUILDING:
            return current
        parent = context.parent
        if parent is None:
            return None
        if parent == context.root:
            return current
        current = parent


def get_root(store: ContextStore, location_id: str | None) -> str | None:
    context = store.get(location_id)
    return context.root if context else None


def parent_chain(store: ContextStore, location_id: str | None) -> list[str]:
    """Follow parent links from ``location_id``; the result starts with it."""
    chain: list[str] = []
    current = location_id
    while current and current not in chain:
        chain.append(current)
        context = store.get(current)
        if context is None:
            break
        current = context.parent
    return chain
