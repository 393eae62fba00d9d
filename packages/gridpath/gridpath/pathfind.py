"""A* search over a Grid."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator

from gridpath.frontier import PriorityFrontier
from gridpath.heuristics import Heuristic, metric_for, scaled
from gridpath.state import SearchState
from gridpath.types import (
    Coord,
    InvalidCoordinateError,
    NodeScore,
    SearchCancelled,
    Topology,
)

if TYPE_CHECKING:
    from gridpath.grid import Grid, GridSnapshot

logger = logging.getLogger(__name__)

ExpandCallback = Callable[[Coord, NodeScore], None]


@dataclass(frozen=True)
class Path:
    """Cells from start to goal inclusive, with the summed edge cost."""

    cells: tuple[Coord, ...]
    cost: float

    @property
    def start(self) -> Coord:
        return self.cells[0]

    @property
    def goal(self) -> Coord:
        return self.cells[-1]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Coord:
        return self.cells[i]


def _require(snap: GridSnapshot, coord: Coord) -> None:
    if not snap.in_bounds(coord):
        raise InvalidCoordinateError(
            coord,
            f"({coord[0]}, {coord[1]}) out of bounds for "
            f"{snap.width}x{snap.height} grid",
        )


def find_path(
    grid: Grid,
    start: Coord,
    goal: Coord,
    heuristic: Heuristic | None = None,
    topology: Topology | None = None,
    *,
    multiplier: float = 1.0,
    state: SearchState | None = None,
    cancel: Callable[[], bool] | None = None,
    on_expand: ExpandCallback | None = None,
) -> Path | None:
    """Find a minimum-cost path from ``start`` to ``goal``, or None.

    Edge cost is the distance paired with the topology (Manhattan when
    4-connected, Euclidean when 8-connected). Terrain weight only gates
    passability: cells weighted 255 are never entered, every other weight
    costs the same. ``heuristic`` defaults to the paired distance and is
    scaled by ``multiplier`` either way.

    Returns None when either endpoint is impassable or the goal cannot be
    reached. Raises InvalidCoordinateError for endpoints off the grid and
    SearchCancelled when ``cancel()`` returns true between expansions.

    ``state`` may be passed in to inspect scores afterwards; it is reset
    before use.
    """
    snap = grid.snapshot(topology)
    _require(snap, start)
    _require(snap, goal)

    estimate = scaled(heuristic or metric_for(snap.topology), multiplier)
    edge_cost = metric_for(snap.topology)

    if state is None:
        state = SearchState()
    else:
        state.reset()

    if not snap.passable(start) or not snap.passable(goal):
        logger.debug("No path %s -> %s: endpoint impassable", start, goal)
        return None

    started = time.perf_counter()
    open_set: PriorityFrontier[Coord] = PriorityFrontier()
    first = state.record(start, 0.0, estimate(start, goal))
    open_set.insert(start, first.f)

    while open_set:
        if cancel is not None and cancel():
            raise SearchCancelled(
                f"Search {start} -> {goal} cancelled after "
                f"{state.expanded} expansions"
            )

        current = open_set.extract_min()
        current_score = state.score(current)
        if current == goal:
            path = Path(cells=tuple(state.reconstruct(goal)), cost=current_score.g)
            logger.debug(
                "Path %s -> %s found: %d cells, cost %.2f, %d expanded in %.2f ms",
                start, goal, len(path), path.cost, state.expanded,
                (time.perf_counter() - started) * 1000,
            )
            return path

        state.close(current)
        if on_expand is not None:
            on_expand(current, current_score)

        for neighbor in snap.neighbors(current):
            if state.is_closed(neighbor) or not snap.passable(neighbor):
                continue
            tentative = current_score.g + edge_cost(current, neighbor)
            seen = state.score(neighbor)
            if seen is None or tentative < seen.g:
                score = state.record(
                    neighbor, tentative, estimate(neighbor, goal), current
                )
                open_set.push(neighbor, score.f)

    logger.debug(
        "No path %s -> %s: %d expanded in %.2f ms",
        start, goal, state.expanded, (time.perf_counter() - started) * 1000,
    )
    return None
