"""Data contracts for world graphs and computed location contexts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

Point = tuple[int, int]


class LocationType(str, Enum):
    OUTDOORS = "outdoors"
    BUILDING = "building"
    ROOM = "room"
    UNKNOWN = "unknown"


class Warp(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target: str
    source: Point
    destination: Point


class WorldLocation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    outdoors: bool = False
    warps: list[Warp] = Field(default_factory=list)


class WorldGraph(BaseModel):
    """Snapshot of every location and its outgoing warps.

    ``building_interiors`` holds locations the primary enumeration does not
    list (farm buildings and the like); they are still valid warp targets.
    """

    model_config = ConfigDict(extra="forbid")

    locations: list[WorldLocation] = Field(default_factory=list)
    building_interiors: list[WorldLocation] = Field(default_factory=list)

    _index: dict[str, WorldLocation] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def validate_graph(self) -> "WorldGraph":
        index: dict[str, WorldLocation] = {}
        for location in self.all_locations():
            if location.id in index:
                raise ValueError(f"duplicate location id {location.id}")
            index[location.id] = location
        self._index = index
        return self

    def all_locations(self) -> list[WorldLocation]:
        return [*self.locations, *self.building_interiors]

    def get(self, location_id: str | None) -> WorldLocation | None:
        if location_id is None:
            return None
        return self._index.get(location_id)


class LocationContext(BaseModel):
    """Where a location sits in the outdoor/building/room hierarchy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    type: LocationType = LocationType.UNKNOWN
    root: str | None = None
    parent: str | None = None
    children: tuple[str, ...] = ()
    neighbors: dict[str, Point] = Field(default_factory=dict)
    warp: Point | None = None
