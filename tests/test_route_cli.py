"""
Tests for the scripts/route.py command line tool.
"""

import importlib.util
from pathlib import Path

import pytest

from graphkit import config
from graphkit.errors import InvalidWeightError


@pytest.fixture(scope="module")
def route():
    """Load scripts/route.py as a module."""
    path = Path(__file__).parent.parent / "scripts" / "route.py"
    spec = importlib.util.spec_from_file_location("route", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestBuildGraph:
    """Test graph construction from arguments."""

    def test_weights_parsed(self, route):
        graph = route.build_graph([["A", "B", "5"], ["B", "C", "2.5"], ["C", "D"]], [], False)
        assert graph.get_weight("A", "B") == 5
        assert graph.get_weight("C", "B") == 2.5
        assert graph.get_weight("D", "C") == 1

    def test_isolated_vertices(self, route):
        graph = route.build_graph([], ["lonely"], True)
        assert graph.get_vertices() == ["lonely"]

    def test_bad_edge_arity(self, route):
        with pytest.raises(ValueError):
            route.build_graph([["A"]], [], False)

    def test_negative_weight(self, route):
        with pytest.raises(InvalidWeightError):
            route.build_graph([["A", "B", "-1"]], [], False)


class TestMain:
    """Test end-to-end command runs."""

    def test_path(self, route, capsys):
        code = route.main([
            "path", "--edge", "A", "B", "5", "--edge", "B", "C", "3",
            "--edge", "A", "C", "10", "--start", "A", "--target", "C",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "A -> B -> C" in out
        assert "Distance: 8" in out

    def test_path_unreachable(self, route, capsys):
        code = route.main([
            "path", "--directed", "--edge", "X", "Y", "--start", "Y", "--target", "X",
        ])
        assert code == 1
        assert "No path" in capsys.readouterr().out

    def test_analyze_dag(self, route, capsys):
        code = route.main([
            "analyze", "--directed", "--edge", "shirt", "tie", "--edge", "tie", "jacket",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "Has cycle: False" in out
        assert "shirt -> tie -> jacket" in out

    def test_analyze_undirected(self, route, capsys):
        route.main(["analyze", "--edge", "A", "B"])
        assert "Topological order: not_applicable" in capsys.readouterr().out

    def test_missing_start(self, route, capsys):
        code = route.main(["bfs", "--edge", "A", "B"])
        assert code == 1
        assert "requires --start" in capsys.readouterr().err

    def test_invalid_settings_reported(self, route, monkeypatch, capsys):
        """A bad LOG_LEVEL should produce an error message, not a traceback."""
        monkeypatch.setattr(config, "LOG_LEVEL", "LOUD")
        code = route.main(["analyze", "--edge", "A", "B"])
        assert code == 1
        assert "Error: invalid settings: log_level_known" in capsys.readouterr().err
