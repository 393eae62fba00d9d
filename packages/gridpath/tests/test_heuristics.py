"""Tests for distance metrics, scaling and SearchConfig."""
from __future__ import annotations

import math

import pytest

from gridpath import SearchConfig, Topology, chebyshev, euclidean, manhattan, metric_for, scaled


class TestMetrics:
    def test_manhattan(self) -> None:
        assert manhattan((0, 0), (3, 4)) == 7.0
        assert manhattan((3, 4), (0, 0)) == 7.0

    def test_euclidean(self) -> None:
        assert euclidean((0, 0), (3, 4)) == 5.0
        assert euclidean((0, 0), (1, 1)) == pytest.approx(math.sqrt(2))

    def test_chebyshev(self) -> None:
        assert chebyshev((0, 0), (3, 4)) == 4.0

    def test_zero_distance(self) -> None:
        for metric in (manhattan, euclidean, chebyshev):
            assert metric((2, 2), (2, 2)) == 0.0

    def test_metric_for_topology(self) -> None:
        assert metric_for(Topology.VON_NEUMANN) is manhattan
        assert metric_for(Topology.MOORE) is euclidean


class TestScaled:
    def test_multiplier_one_returns_metric(self) -> None:
        assert scaled(manhattan, 1) is manhattan

    def test_multiplier_zero(self) -> None:
        h = scaled(euclidean, 0)
        assert h((0, 0), (10, 10)) == 0.0

    def test_multiplier_above_one(self) -> None:
        h = scaled(manhattan, 2.5)
        assert h((0, 0), (1, 1)) == 5.0

    def test_negative_multiplier_rejected(self) -> None:
        with pytest.raises(ValueError):
            scaled(manhattan, -0.1)


class TestSearchConfig:
    def test_defaults(self) -> None:
        config = SearchConfig()
        assert config.topology is Topology.VON_NEUMANN
        assert config.heuristic_multiplier == 1.0

    def test_frozen(self) -> None:
        config = SearchConfig()
        with pytest.raises(AttributeError):
            config.heuristic_multiplier = 2.0  # type: ignore[misc]

    def test_negative_multiplier_rejected(self) -> None:
        with pytest.raises(ValueError):
            SearchConfig(heuristic_multiplier=-1.0)

    def test_with_multiplier(self) -> None:
        config = SearchConfig().with_multiplier(3.0)
        assert config.heuristic_multiplier == 3.0
        with pytest.raises(ValueError):
            config.with_multiplier(-2.0)

    def test_with_topology(self) -> None:
        config = SearchConfig(heuristic_multiplier=2.0).with_topology(Topology.MOORE)
        assert config.topology is Topology.MOORE
        assert config.heuristic_multiplier == 2.0
