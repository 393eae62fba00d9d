"""Distance metrics used as heuristics and edge costs."""
from __future__ import annotations

import math
from typing import Callable

from gridpath.types import Coord, Topology

Heuristic = Callable[[Coord, Coord], float]


def manhattan(a: Coord, b: Coord) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def euclidean(a: Coord, b: Coord) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def chebyshev(a: Coord, b: Coord) -> float:
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


def metric_for(topology: Topology) -> Heuristic:
    """Distance paired with a topology: Manhattan for 4-connected, Euclidean for 8."""
    if topology is Topology.VON_NEUMANN:
        return manhattan
    return euclidean


def scaled(metric: Heuristic, multiplier: float) -> Heuristic:
    """Wrap ``metric`` so its estimate is multiplied by ``multiplier``.

    0 turns A* into uniform-cost search, 1 keeps the paired metrics
    admissible, and anything above 1 leans towards greedy best-first.
    """
    if multiplier < 0:
        raise ValueError(f"multiplier must be >= 0, got {multiplier}")
    if multiplier == 1:
        return metric

    def weighted(a: Coord, b: Coord) -> float:
        return metric(a, b) * multiplier

    return weighted
