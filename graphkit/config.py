"""
Configuration constants for graphkit.

All defaults and tunable parameters are defined here.
Values can be overridden from the environment (or a project .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of graphkit/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Names of integer settings whose environment value could not be parsed
_UNPARSED_SETTINGS: list[str] = []


def _env_int(name: str, default: int) -> int:
    """Read an integer from the environment, keeping `default` if it is malformed."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        _UNPARSED_SETTINGS.append(name)
        return default


# =============================================================================
# Graph Configuration
# =============================================================================

# Weight given to an edge when add_edge() is called without one
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Shortest-Path Configuration
# =============================================================================

# Frontier used by Dijkstra when none is passed explicitly:
# "scan" = linear scan, O(V^2 + E); "heap" = binary heap, O((V+E) log V)
DEFAULT_FRONTIER = os.environ.get("GRAPHKIT_FRONTIER", "scan")

AVAILABLE_FRONTIERS = ("scan", "heap")

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Sizes of the random graphs generated by scripts/benchmark.py
BENCHMARK_SIZES = (100, 500, 1000)

# Edges generated per vertex
BENCHMARK_EDGE_FACTOR = 5

# Timed runs per (size, frontier) pair
BENCHMARK_REPEATS = 5

# Upper bound (inclusive) for random edge weights
BENCHMARK_MAX_WEIGHT = 100

# Seed for reproducible random graphs
BENCHMARK_SEED = _env_int("GRAPHKIT_BENCHMARK_SEED", 42)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_settings() -> dict[str, bool]:
    """Check that configured values are usable."""
    return {
        "default_frontier_known": DEFAULT_FRONTIER in AVAILABLE_FRONTIERS,
        "default_weight_non_negative": DEFAULT_EDGE_WEIGHT >= 0,
        "benchmark_sizes_positive": all(size > 0 for size in BENCHMARK_SIZES),
        "benchmark_repeats_positive": BENCHMARK_REPEATS > 0,
        "log_level_known": LOG_LEVEL.upper() in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        "env_integers_parsed": not _UNPARSED_SETTINGS,
    }


def get_invalid_settings() -> list[str]:
    """Return list of failed setting checks."""
    status = validate_settings()
    return [name for name, ok in status.items() if not ok]
