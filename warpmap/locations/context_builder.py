"""Map every location in a warp graph onto its outdoor root.

Outdoor locations are their own roots. Indoor locations are resolved by
walking warps outward (indoor to outdoor) until an outdoor location is
reached, classifying each location on the way as a building (it has a
warp straight outdoors) or a room (it only leads to other indoor areas).
The walk runs from the inside out because warps alone do not reach every
interior, so every indoor location is used as a starting point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from warpmap.locations.context_store import ContextStore
from warpmap.locations.contracts import (
    LocationContext,
    LocationType,
    Point,
    WorldGraph,
    WorldLocation,
)

logger = logging.getLogger(__name__)


@dataclass
class _ContextDraft:
    id: str
    type: LocationType = LocationType.UNKNOWN
    root: str | None = None
    parent: str | None = None
    children: list[str] = field(default_factory=list)
    neighbors: dict[str, Point] = field(default_factory=dict)
    warp: Point | None = None

    def add_child(self, child_id: str) -> None:
        if child_id not in self.children:
            self.children.append(child_id)

    def freeze(self) -> LocationContext:
        return LocationContext(
            id=self.id,
            type=self.type,
            root=self.root,
            parent=self.parent,
            children=tuple(self.children),
            neighbors=dict(self.neighbors),
            warp=self.warp,
        )


class ContextBuilder:
    def __init__(self, world: WorldGraph) -> None:
        self._world = world
        self._drafts: dict[str, _ContextDraft] = {}

    def build(self) -> ContextStore:
        self._drafts = {}
        locations = self._world.all_locations()

        for location in locations:
            if location.outdoors:
                self._map_outdoor_neighbors(location)

        # Every interior starts its own walk, even ones an earlier walk reached.
        for location in locations:
            if location.outdoors:
                continue
            self._map_root(location, None, None, False, None, frozenset())

        unresolved = [
            draft.id for draft in self._drafts.values() if draft.root is None
        ]
        if unresolved:
            logger.debug("No outdoor root found for %s", ", ".join(unresolved))
        logger.info(
            "Mapped %d locations (%d unresolved)", len(self._drafts), len(unresolved)
        )
        return ContextStore(
            {draft_id: draft.freeze() for draft_id, draft in self._drafts.items()}
        )

    def _ensure(self, location_id: str) -> _ContextDraft:
        draft = self._drafts.get(location_id)
        if draft is None:
            draft = _ContextDraft(id=location_id)
            self._drafts[location_id] = draft
        return draft

    def _map_outdoor_neighbors(self, location: WorldLocation) -> None:
        draft = self._ensure(location.id)
        draft.type = LocationType.OUTDOORS
        draft.root = location.id
        for warp in location.warps:
            target = self._world.get(warp.target)
            if target is None:
                logger.debug(
                    "%s: skipping warp to unknown %s", location.id, warp.target
                )
                continue
            if target.outdoors and warp.target not in draft.neighbors:
                draft.neighbors[warp.target] = warp.source

    def _map_root(
        self,
        current: WorldLocation,
        previous: WorldLocation | None,
        root: str | None,
        has_outdoor_warp: bool,
        entry: Point | None,
        trail: frozenset[str],
    ) -> str | None:
        # Several warps may lead back to the location we came from.
        if previous is not None and current.id == previous.id:
            return root

        draft = self._ensure(current.id)
        if previous is not None and entry is not None:
            previous_draft = self._drafts[previous.id]
            previous_draft.warp = entry
            if root != current.id:
                previous_draft.parent = current.id

        # A root found deeper down is passed back up unchanged.
        if root is not None:
            draft.root = root
            return root

        if current.outdoors:
            draft.type = LocationType.OUTDOORS
            draft.root = current.id
            if previous is not None:
                draft.add_child(previous.id)
            return current.id

        trail = trail | {current.id}
        previous_id = previous.id if previous is not None else None
        for warp in current.warps:
            if warp.target == current.id or warp.target == previous_id:
                continue
            if warp.target in trail:
                logger.debug("%s: skipping warp back into %s", current.id, warp.target)
                continue
            target = self._world.get(warp.target)
            if target is None:
                logger.debug(
                    "%s: skipping warp to unknown %s", current.id, warp.target
                )
                continue

            # One warp outdoors makes this a building; otherwise it is a room.
            if target.outdoors:
                has_outdoor_warp = True
            draft.type = (
                LocationType.BUILDING if has_outdoor_warp else LocationType.ROOM
            )

            if previous is not None:
                self._drafts[previous.id].parent = current.id
                draft.add_child(previous.id)

            root = self._map_root(
                target, current, root, has_outdoor_warp, warp.destination, trail
            )
            draft.root = root
            return root

        return root


def build_location_contexts(world: WorldGraph) -> ContextStore:
    """Build a fresh :class:`ContextStore` for ``world``."""
    return ContextBuilder(world).build()
