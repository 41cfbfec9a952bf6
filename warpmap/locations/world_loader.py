"""Load world graph snapshots from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from warpmap.locations.context_builder import build_location_contexts
from warpmap.locations.context_store import ContextStore
from warpmap.locations.contracts import WorldGraph


@dataclass(frozen=True)
class WorldPaths:
    """Where the world snapshot lives on disk."""

    base_dir: Path = Path("world")
    graph_file: str = "world.json"

    @property
    def world_json(self) -> Path:
        return self.base_dir / self.graph_file


def load_world_graph(*, paths: WorldPaths | None = None) -> WorldGraph:
    snapshot_path = (paths or WorldPaths()).world_json
    raw = _read_snapshot(snapshot_path)
    try:
        return WorldGraph.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid world graph in {snapshot_path}: {exc}") from exc


def load_location_contexts(*, paths: WorldPaths | None = None) -> ContextStore:
    return build_location_contexts(load_world_graph(paths=paths))


def _read_snapshot(snapshot_path: Path) -> Any:
    if not snapshot_path.is_file():
        raise FileNotFoundError(f"Missing world data file: {snapshot_path}")
    with snapshot_path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Malformed JSON in {snapshot_path}: {exc}") from exc
