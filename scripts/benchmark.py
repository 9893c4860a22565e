#!/usr/bin/env python3
"""
Benchmark Dijkstra's frontier strategies on random graphs.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --sizes 200 2000 --repeats 10
    python scripts/benchmark.py --directed --seed 7
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

from graphkit.benchmark import compare_frontiers, random_graph  # noqa: E402
from graphkit.config import (  # noqa: E402
    BENCHMARK_EDGE_FACTOR,
    BENCHMARK_REPEATS,
    BENCHMARK_SEED,
    BENCHMARK_SIZES,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    get_invalid_settings,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Compare Dijkstra frontier strategies")
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=list(BENCHMARK_SIZES),
        help=f"Vertex counts to benchmark (default: {' '.join(map(str, BENCHMARK_SIZES))})",
    )
    parser.add_argument(
        "--edge-factor",
        type=int,
        default=BENCHMARK_EDGE_FACTOR,
        help=f"Edges per vertex (default: {BENCHMARK_EDGE_FACTOR})",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=BENCHMARK_REPEATS,
        help=f"Timed runs per frontier (default: {BENCHMARK_REPEATS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=BENCHMARK_SEED,
        help=f"Random seed (default: {BENCHMARK_SEED})",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Benchmark directed graphs",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args()


def run_benchmark(args: argparse.Namespace) -> None:
    print("=" * 70)
    print("graphkit - Dijkstra Frontier Comparison")
    print("=" * 70)

    rows = []
    for size in args.sizes:
        graph = random_graph(
            size,
            size * args.edge_factor,
            directed=args.directed,
            seed=args.seed,
        )
        print(f"\n{graph!r}")
        print("-" * 50)

        for result in compare_frontiers(graph, start=0, repeats=args.repeats):
            rows.append(result)
            print(
                f"  {result.frontier:6} : mean {result.mean_ms:8.2f}ms  "
                f"median {result.median_ms:8.2f}ms  p95 {result.p95_ms:8.2f}ms"
            )

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY (median ms)")
    print("=" * 70)

    by_size: dict[int, dict[str, float]] = {}
    for result in rows:
        by_size.setdefault(result.vertices, {})[result.frontier] = result.median_ms

    for size, medians in by_size.items():
        scan = medians.get("scan")
        heap = medians.get("heap")
        speedup = f"{scan / heap:.1f}x" if scan and heap else "n/a"
        print(f"  {size:>7,} vertices : scan {scan:8.2f}  heap {heap:8.2f}  speedup {speedup}")


def main() -> int:
    """Main entry point."""
    args = parse_args()

    invalid = get_invalid_settings()
    if invalid:
        print(f"Error: invalid settings: {', '.join(invalid)}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        run_benchmark(args)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
