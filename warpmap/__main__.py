"""Module entry point for `python -m warpmap`."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from warpmap.locations.world_loader import WorldPaths, load_location_contexts
from warpmap.render.hierarchy_view import render_hierarchy, render_location


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Map a world's warp graph into roots, buildings and rooms."
    )
    parser.add_argument(
        "--world-dir",
        type=Path,
        default=WorldPaths().base_dir,
        help="Directory holding world.json.",
    )
    parser.add_argument(
        "--location",
        default=None,
        help="Show query results for a single location id.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the computed contexts as JSON.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log traversal details.",
    )
    args = parser.parse_args(argv)

    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        store = load_location_contexts(paths=WorldPaths(base_dir=args.world_dir))
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.json:
        console.print_json(json.dumps(store.to_payload()))
        return

    if args.location is not None:
        console.print(render_location(store, args.location))
        return

    console.print(render_hierarchy(store))


if __name__ == "__main__":
    main()
