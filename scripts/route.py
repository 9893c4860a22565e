#!/usr/bin/env python3
"""
graphkit CLI - Build a graph from the command line and run an algorithm on it.

Usage:
    python scripts/route.py path --edge A B 5 --edge B C 3 --edge A C 10 --start A --target C
    python scripts/route.py bfs --edge 1 2 --edge 2 3 --start 1
    python scripts/route.py dfs --directed --edge X Y --edge Y Z --start X
    python scripts/route.py analyze --directed --edge shirt tie --edge tie jacket --edge pants shoes

Commands:
    bfs      - Hop distances from --start
    dfs      - Depth-first pre-order from --start
    path     - Lowest-weight path from --start to --target
    analyze  - Connectivity, cycle detection, and topological order

Edges are given as `--edge SOURCE TARGET [WEIGHT]` (weight defaults to 1).
Vertices are plain strings.
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

from graphkit.config import (  # noqa: E402
    AVAILABLE_FRONTIERS,
    DEFAULT_EDGE_WEIGHT,
    DEFAULT_FRONTIER,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    get_invalid_settings,
)
from graphkit.errors import GraphError  # noqa: E402
from graphkit.graph import Graph, dfs_order  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run graph algorithms on a graph given as edge arguments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "command",
        choices=["bfs", "dfs", "path", "analyze"],
        help="Algorithm to run",
    )
    parser.add_argument(
        "--edge",
        nargs="+",
        action="append",
        default=[],
        metavar="VERTEX",
        help="Edge as SOURCE TARGET [WEIGHT] (repeatable)",
    )
    parser.add_argument(
        "--vertex",
        action="append",
        default=[],
        help="Isolated vertex to add (repeatable)",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Treat edges as one-way",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Start vertex (bfs, dfs, path)",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Target vertex (path)",
    )
    parser.add_argument(
        "--frontier",
        type=str,
        default=DEFAULT_FRONTIER,
        choices=AVAILABLE_FRONTIERS,
        help=f"Dijkstra frontier (default: {DEFAULT_FRONTIER})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def parse_weight(text: str) -> float:
    """Parse an edge weight, keeping whole numbers as ints."""
    value = float(text)
    return int(value) if value.is_integer() else value


def build_graph(edges: list[list[str]], vertices: list[str], directed: bool) -> Graph[str]:
    """
    Build a graph from parsed --edge and --vertex arguments.

    Raises:
        ValueError: If an edge has the wrong number of fields or a bad weight
        InvalidWeightError: If a weight is negative
    """
    graph: Graph[str] = Graph(directed=directed)

    for fields in edges:
        if len(fields) not in (2, 3):
            raise ValueError(f"--edge expects SOURCE TARGET [WEIGHT], got {' '.join(fields)!r}")
        weight = parse_weight(fields[2]) if len(fields) == 3 else DEFAULT_EDGE_WEIGHT
        graph.add_edge(fields[0], fields[1], weight)

    for vertex in vertices:
        graph.add_vertex(vertex)

    logger.debug(f"Built {graph!r}")
    return graph


def run_command(args: argparse.Namespace, graph: Graph[str]) -> int:
    """Run the selected command and print its result. Returns exit code."""
    if args.command in ("bfs", "dfs", "path") and args.start is None:
        raise ValueError(f"'{args.command}' requires --start")

    if args.command == "bfs":
        for vertex, distance in graph.bfs(args.start).items():
            print(f"  {vertex}: {distance}")
        return 0

    if args.command == "dfs":
        print("  " + " -> ".join(dfs_order(graph, args.start)))
        return 0

    if args.command == "path":
        if args.target is None:
            raise ValueError("'path' requires --target")
        result = graph.shortest_path(args.start, args.target, frontier=args.frontier)
        if not result.found:
            print(f"No path from '{args.start}' to '{args.target}'")
            return 1
        print(f"  Path: {' -> '.join(result.path)}")
        print(f"  Distance: {result.distance}")
        print(f"  Hops: {result.hops}")
        return 0

    stats = graph.stats()
    print(f"  Directed: {stats['directed']}")
    print(f"  Vertices: {stats['vertices']}")
    print(f"  Edges: {stats['edges']}")
    print(f"  Connected: {graph.is_connected()}")
    print(f"  Has cycle: {graph.has_cycle()}")

    topo = graph.topological_sort()
    if topo.is_sorted:
        print(f"  Topological order: {' -> '.join(topo.order)}")
    else:
        print(f"  Topological order: {topo.status.value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    invalid = get_invalid_settings()
    if invalid:
        print(f"Error: invalid settings: {', '.join(invalid)}", file=sys.stderr)
        return 1

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL.upper()
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        graph = build_graph(args.edge, args.vertex, args.directed)
        return run_command(args, graph)
    except (GraphError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
