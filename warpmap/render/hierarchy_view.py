"""Rich rendering of a context store for the command line."""

from __future__ import annotations

from collections import Counter

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from warpmap.locations.context_store import ContextStore
from warpmap.locations.contracts import LocationType
from warpmap.locations.queries import (
    get_building,
    get_mines_location_name,
    get_root,
    is_outdoors,
    parent_chain,
)

_TYPE_STYLES = {
    LocationType.OUTDOORS: "green",
    LocationType.BUILDING: "cyan",
    LocationType.ROOM: "white",
    LocationType.UNKNOWN: "red",
}


def render_hierarchy(store: ContextStore) -> RenderableType:
    tree = Tree(Text("World", style="bold"))
    roots = [
        context
        for _, context in store.items()
        if context.type == LocationType.OUTDOORS
    ]
    seen: set[str] = set()
    for root in roots:
        _add_branch(store, tree, root.id, seen)

    orphans = [location_id for location_id in store if location_id not in seen]
    if orphans:
        unresolved = tree.add(Text("Unresolved", style="red"))
        for location_id in orphans:
            unresolved.add(_label(store, location_id))
    return Group(tree, _render_summary(store))


def render_location(store: ContextStore, location_id: str) -> RenderableType:
    context = store.get(location_id)
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Type", context.type.value if context else "-")
    table.add_row("Root", get_root(store, location_id) or "-")
    table.add_row("Parent", (context.parent if context else None) or "-")
    table.add_row("Building", get_building(store, location_id) or "-")
    table.add_row("Outdoors", "yes" if is_outdoors(store, location_id) else "no")
    table.add_row("Mine area", get_mines_location_name(location_id) or "-")
    table.add_row("Chain", " > ".join(parent_chain(store, location_id)) or "-")
    if context and context.neighbors:
        table.add_row(
            "Neighbors",
            ", ".join(
                f"{name}@{x},{y}" for name, (x, y) in context.neighbors.items()
            ),
        )
    return Panel(table, title=location_id)


def _add_branch(
    store: ContextStore, node: Tree, location_id: str, seen: set[str]
) -> None:
    if location_id in seen:
        return
    seen.add(location_id)
    branch = node.add(_label(store, location_id))
    context = store.get(location_id)
    if context is None:
        return
    for child_id in context.children:
        _add_branch(store, branch, child_id, seen)


def _label(store: ContextStore, location_id: str) -> Text:
    context = store.get(location_id)
    kind = context.type if context else LocationType.UNKNOWN
    return Text(f"{location_id} ({kind.value})", style=_TYPE_STYLES[kind])


def _render_summary(store: ContextStore) -> RenderableType:
    counts = Counter(context.type for _, context in store.items())
    table = Table(title="Locations", show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Count", justify="right")
    for kind in LocationType:
        table.add_row(kind.value, str(counts.get(kind, 0)))
    return table
