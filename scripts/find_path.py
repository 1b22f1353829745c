#!/usr/bin/env python3
"""
Graph Search CLI - Find a path with any of the search algorithms.

Usage:
    python scripts/find_path.py --graph data/example.json --start A --goal E
    python scripts/find_path.py --graph data/example.json --start A --goal E --algorithm bfs
    python scripts/find_path.py --grid 10x10 --start 0,0 --goal 9,9 --algorithm astar --heuristic manhattan
    python scripts/find_path.py --grid 8x8 --blocked 3,0 3,1 3,2 --start 0,0 --goal 7,0 --algorithm astar

Algorithms:
    bfs           - Fewest hops (ignores weights)
    dfs           - Any path, explicit stack
    dfs-recursive - Any path, recursive (limited by the recursion limit)
    dijkstra      - Lowest total weight
    astar         - Lowest total weight, guided by --heuristic

Graph files:
    A --graph path that does not exist is also looked up in data/, so
    "--graph example.json" finds the bundled example.

Vertices:
    On a --grid, vertices are written as "x,y". Vertices in a --graph file
    are matched as written; a label that looks like an integer is also tried
    as an integer.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

from graphsearch.config import (  # noqa: E402 - must be after sys.path modification
    ASTAR_WEIGHT,
    DATA_DIR,
    DEFAULT_GRID_SIZE,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from graphsearch.data import load_graph  # noqa: E402
from graphsearch.graph import (  # noqa: E402
    Graph,
    GraphError,
    UnknownVertexError,
    astar,
    bfs,
    dfs,
    dfs_recursive,
    dijkstra,
    grid_graph,
)
from graphsearch.heuristics import get_heuristic  # noqa: E402

ALGORITHMS = ["bfs", "dfs", "dfs-recursive", "dijkstra", "astar"]
HEURISTICS = ["zero", "manhattan", "euclidean", "chebyshev"]


def parse_cell(text: str) -> tuple[int, int]:
    """Parse an "x,y" grid cell."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a cell like '3,4', got '{text}'") from None
    return x, y


def parse_size(text: str) -> tuple[int, int]:
    """Parse a "WxH" grid size."""
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a size like '10x10', got '{text}'") from None
    return width, height


def resolve_vertex(graph: Graph, label: str, on_grid: bool):
    """Map a command-line label to a vertex of the graph."""
    if on_grid:
        return parse_cell(label)
    if label in graph:
        return label
    try:
        as_int = int(label)
    except ValueError:
        return label
    return as_int if as_int in graph else label


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path through a graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--graph",
        type=Path,
        help="Graph file (.msgpack or .json)",
    )
    source.add_argument(
        "--grid",
        type=parse_size,
        help=f"Search a WxH grid instead (default when no --graph: "
        f"{DEFAULT_GRID_SIZE[0]}x{DEFAULT_GRID_SIZE[1]})",
    )

    parser.add_argument(
        "--blocked",
        type=parse_cell,
        nargs="*",
        default=[],
        help="Grid cells to block, as x,y (only with --grid)",
    )
    parser.add_argument(
        "--diagonal",
        action="store_true",
        help="Allow diagonal moves on the grid",
    )
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start vertex",
    )
    parser.add_argument(
        "--goal",
        type=str,
        required=True,
        help="Goal vertex",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="dijkstra",
        choices=ALGORITHMS,
        help="Search algorithm (default: dijkstra)",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        default="zero",
        choices=HEURISTICS,
        help="A* heuristic (default: zero; distance heuristics need grid vertices)",
    )
    parser.add_argument(
        "--astar-weight",
        type=float,
        default=ASTAR_WEIGHT,
        help=f"Weighted A* multiplier on the heuristic (default: {ASTAR_WEIGHT})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum BFS depth (default: unbounded)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_graph(args: argparse.Namespace) -> Graph:
    """Load the graph file or build the requested grid."""
    if args.graph is not None:
        path = args.graph
        if not path.exists() and (DATA_DIR / path).exists():
            path = DATA_DIR / path
        return load_graph(path)
    width, height = args.grid or DEFAULT_GRID_SIZE
    return grid_graph(width, height, blocked=args.blocked, diagonal=args.diagonal)


def run_search(graph: Graph, args: argparse.Namespace, start, goal):
    """Dispatch to the chosen algorithm."""
    if args.algorithm == "bfs":
        return bfs(graph, start, goal, max_depth=args.max_depth)
    if args.algorithm == "dfs":
        return dfs(graph, start, goal)
    if args.algorithm == "dfs-recursive":
        return dfs_recursive(graph, start, goal)
    if args.algorithm == "astar":
        return astar(
            graph,
            start,
            goal,
            heuristic=get_heuristic(args.heuristic),
            weight=args.astar_weight,
        )
    return dijkstra(graph, start, target=goal).path_to(goal)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    on_grid = args.graph is None

    try:
        graph = build_graph(args)
        start = resolve_vertex(graph, args.start, on_grid)
        goal = resolve_vertex(graph, args.goal, on_grid)
        for vertex in (start, goal):
            if vertex not in graph:
                raise UnknownVertexError(vertex)
        result = run_search(graph, args, start, goal)
    except (GraphError, FileNotFoundError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n" + "=" * 60)
    print("Graph Search")
    print("=" * 60)
    print(f"  Graph:     {graph!r}")
    print(f"  Algorithm: {args.algorithm}")
    print(f"  Start:     {start}")
    print(f"  Goal:      {goal}")
    print("=" * 60 + "\n")

    if not result:
        print(f"No path: {result}")
        return 1

    print("Path found:")
    for i, vertex in enumerate(result.vertices):
        marker = " (START)" if i == 0 else " (GOAL)" if i == result.hops else ""
        print(f"  {i}. {vertex}{marker}")

    print(f"\nHops: {result.hops}")
    print(f"Cost: {result.cost:g}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
