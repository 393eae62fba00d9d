"""Tests for the GridPathfinder driver."""
from __future__ import annotations

import pytest

from gridpath import (
    IMPASSABLE,
    CellInfo,
    Grid,
    GridPathfinder,
    InvalidCoordinateError,
    SearchConfig,
    Topology,
)


class TestPathfinderSetup:
    def test_default_endpoints(self) -> None:
        pf = GridPathfinder(Grid(10, 8))
        assert pf.start == (0, 0)
        assert pf.goal == (9, 7)

    def test_default_config_follows_grid(self) -> None:
        pf = GridPathfinder(Grid(3, 3, topology=Topology.MOORE))
        assert pf.topology is Topology.MOORE
        assert pf.heuristic_multiplier == 1.0

    def test_config_topology_applied_to_grid(self) -> None:
        grid = Grid(3, 3)
        GridPathfinder(grid, SearchConfig(topology=Topology.MOORE))
        assert grid.topology is Topology.MOORE

    def test_set_endpoints(self) -> None:
        pf = GridPathfinder(Grid(5, 5))
        pf.start = (1, 1)
        pf.goal = (3, 4)
        assert pf.find_path().cells[0] == (1, 1)
        assert pf.last_path.goal == (3, 4)

    def test_endpoint_bounds_checked(self) -> None:
        pf = GridPathfinder(Grid(5, 5))
        with pytest.raises(InvalidCoordinateError):
            pf.start = (5, 0)
        with pytest.raises(InvalidCoordinateError):
            pf.goal = (0, -1)
        assert pf.start == (0, 0)


class TestPathfinderRuntimeSettings:
    def test_multiplier_adjustable(self) -> None:
        pf = GridPathfinder(Grid(10, 10))
        pf.heuristic_multiplier = 0.0
        pf.find_path((0, 5), (9, 5))
        uniform = len(pf.scores())
        pf.heuristic_multiplier = 1.0
        pf.find_path((0, 5), (9, 5))
        assert len(pf.scores()) < uniform

    def test_negative_multiplier_rejected(self) -> None:
        pf = GridPathfinder(Grid(3, 3))
        with pytest.raises(ValueError):
            pf.heuristic_multiplier = -1.0
        assert pf.heuristic_multiplier == 1.0

    def test_topology_switch(self) -> None:
        grid = Grid.from_rows([
            ".#",
            "#.",
        ])
        pf = GridPathfinder(grid)
        assert pf.find_path() is None
        pf.topology = Topology.MOORE
        assert grid.topology is Topology.MOORE
        assert pf.config.topology is Topology.MOORE
        assert pf.find_path() is not None

    def test_toggle_blocks_path(self) -> None:
        pf = GridPathfinder(Grid(3, 1))
        assert pf.find_path() is not None
        assert pf.toggle((1, 0)) == IMPASSABLE
        assert pf.find_path() is None
        assert pf.last_path is None


class TestPathfinderHooks:
    def test_on_complete(self) -> None:
        results = []
        pf = GridPathfinder(Grid(3, 3))
        pf.on_complete(lambda start, goal, path: results.append((start, goal, path)))
        path = pf.find_path()
        assert results == [((0, 0), (2, 2), path)]

    def test_on_complete_no_path(self) -> None:
        results = []
        grid = Grid(3, 3)
        grid.set_weight((2, 2), IMPASSABLE)
        pf = GridPathfinder(grid)
        pf.on_complete(lambda start, goal, path: results.append(path))
        pf.find_path()
        assert results == [None]

    def test_on_expand_multiple_hooks(self) -> None:
        a, b = [], []
        pf = GridPathfinder(Grid(3, 3))
        pf.on_expand(lambda coord, score: a.append(coord))
        pf.on_expand(lambda coord, score: b.append(coord))
        pf.find_path()
        assert a == b
        assert a[0] == (0, 0)


class TestPathfinderIntrospection:
    def test_inspect_visited_cell(self) -> None:
        pf = GridPathfinder(Grid(3, 3))
        pf.find_path()
        info = pf.inspect((2, 2))
        assert info == CellInfo(x=2, y=2, weight=0, g=4.0, f=4.0)

    def test_inspect_before_search(self) -> None:
        pf = GridPathfinder(Grid(3, 3))
        info = pf.inspect((1, 1))
        assert info.g is None
        assert info.f is None

    def test_inspect_reports_weight(self) -> None:
        grid = Grid(3, 3)
        grid.set_weight((1, 1), 17)
        assert GridPathfinder(grid).inspect((1, 1)).weight == 17

    def test_scores_are_read_only(self) -> None:
        pf = GridPathfinder(Grid(3, 3))
        pf.find_path()
        scores = pf.scores()
        assert scores[(0, 0)].g == 0.0
        with pytest.raises(TypeError):
            scores[(0, 0)] = None  # type: ignore[index]

    def test_scores_replaced_by_next_search(self) -> None:
        pf = GridPathfinder(Grid(5, 5))
        pf.find_path()
        pf.find_path((2, 2), (2, 2))
        assert list(pf.scores()) == [(2, 2)]
