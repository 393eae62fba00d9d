"""gridpath - A* search over 2D weighted grids."""
from __future__ import annotations

from gridpath.config import SearchConfig
from gridpath.frontier import PriorityFrontier
from gridpath.grid import Grid, GridSnapshot
from gridpath.heuristics import chebyshev, euclidean, manhattan, metric_for, scaled
from gridpath.pathfind import Path, find_path
from gridpath.pathfinder import CellInfo, GridPathfinder
from gridpath.state import SearchState
from gridpath.types import (
    IMPASSABLE,
    Cell,
    Coord,
    FrontierEmptyError,
    HeapInvariantError,
    InvalidCoordinateError,
    NodeScore,
    SearchCancelled,
    Topology,
)

__all__ = [
    "IMPASSABLE",
    "Cell",
    "CellInfo",
    "Coord",
    "FrontierEmptyError",
    "Grid",
    "GridPathfinder",
    "GridSnapshot",
    "HeapInvariantError",
    "InvalidCoordinateError",
    "NodeScore",
    "Path",
    "PriorityFrontier",
    "SearchCancelled",
    "SearchConfig",
    "SearchState",
    "Topology",
    "chebyshev",
    "euclidean",
    "find_path",
    "manhattan",
    "metric_for",
    "scaled",
]
