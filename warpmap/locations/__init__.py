"""Location hierarchy derived from a world's warp graph."""

from warpmap.locations.context_builder import ContextBuilder, build_location_contexts
from warpmap.locations.context_store import ContextStore
from warpmap.locations.contracts import (
    LocationContext,
    LocationType,
    Point,
    Warp,
    WorldGraph,
    WorldLocation,
)
from warpmap.locations.queries import (
    DEFAULT_SUBLEVEL_NAMING,
    SublevelNaming,
    get_building,
    get_mines_location_name,
    get_root,
    is_outdoors,
    parent_chain,
)
from warpmap.locations.world_loader import (
    WorldPaths,
    load_location_contexts,
    load_world_graph,
)

__all__ = [
    "ContextBuilder",
    "ContextStore",
    "DEFAULT_SUBLEVEL_NAMING",
    "LocationContext",
    "LocationType",
    "Point",
    "SublevelNaming",
    "Warp",
    "WorldGraph",
    "WorldLocation",
    "WorldPaths",
    "build_location_contexts",
    "get_building",
    "get_mines_location_name",
    "get_root",
    "is_outdoors",
    "load_location_contexts",
    "load_world_graph",
    "parent_chain",
]
