"""GridPathfinder - stateful driver around find_path for interactive callers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from gridpath.config import SearchConfig
from gridpath.grid import Grid
from gridpath.pathfind import ExpandCallback, Path, find_path
from gridpath.state import SearchState
from gridpath.types import Coord, NodeScore, Topology

CompleteCallback = Callable[[Coord, Coord, Path | None], None]


@dataclass(frozen=True)
class CellInfo:
    """What a HUD shows for one cell. Scores are None if the last search never reached it."""

    x: int
    y: int
    weight: int
    g: float | None
    f: float | None


class GridPathfinder:
    """Holds a grid, the selected endpoints and the outcome of the last search.

    Start defaults to the first cell and goal to the last one. Each call to
    ``find_path`` uses a fresh SearchState; the previous one is only kept for
    ``scores()`` and ``inspect()``.
    """

    def __init__(self, grid: Grid, config: SearchConfig | None = None) -> None:
        self._grid = grid
        self._config = config or SearchConfig(topology=grid.topology)
        if self._config.topology is not grid.topology:
            grid.topology = self._config.topology
        self._start: Coord = (0, 0)
        self._goal: Coord = (grid.width - 1, grid.height - 1)
        self._last_state = SearchState()
        self._last_path: Path | None = None
        self._expand_hooks: list[ExpandCallback] = []
        self._complete_hooks: list[CompleteCallback] = []

    # --- Properties ---

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def start(self) -> Coord:
        return self._start

    @start.setter
    def start(self, coord: Coord) -> None:
        self._grid.cell(coord)
        self._start = coord

    @property
    def goal(self) -> Coord:
        return self._goal

    @goal.setter
    def goal(self, coord: Coord) -> None:
        self._grid.cell(coord)
        self._goal = coord

    @property
    def heuristic_multiplier(self) -> float:
        return self._config.heuristic_multiplier

    @heuristic_multiplier.setter
    def heuristic_multiplier(self, value: float) -> None:
        self._config = self._config.with_multiplier(value)

    @property
    def topology(self) -> Topology:
        return self._config.topology

    @topology.setter
    def topology(self, topology: Topology) -> None:
        self._config = self._config.with_topology(topology)
        self._grid.topology = topology

    @property
    def last_path(self) -> Path | None:
        return self._last_path

    # --- Hooks ---

    def on_expand(self, hook: ExpandCallback) -> None:
        self._expand_hooks.append(hook)

    def on_complete(self, hook: CompleteCallback) -> None:
        self._complete_hooks.append(hook)

    def _dispatch_expand(self, coord: Coord, score: NodeScore) -> None:
        for hook in self._expand_hooks:
            hook(coord, score)

    # --- Search ---

    def find_path(
        self,
        start: Coord | None = None,
        goal: Coord | None = None,
        cancel: Callable[[], bool] | None = None,
    ) -> Path | None:
        """Search between the given or selected endpoints and remember the result."""
        start = self._start if start is None else start
        goal = self._goal if goal is None else goal
        state = SearchState()
        path = find_path(
            self._grid,
            start,
            goal,
            topology=self._config.topology,
            multiplier=self._config.heuristic_multiplier,
            state=state,
            cancel=cancel,
            on_expand=self._dispatch_expand if self._expand_hooks else None,
        )
        self._last_state = state
        self._last_path = path
        for hook in self._complete_hooks:
            hook(start, goal, path)
        return path

    def toggle(self, coord: Coord) -> int:
        return self._grid.toggle(coord)

    # --- Introspection ---

    def scores(self) -> Mapping[Coord, NodeScore]:
        """Read-only scores recorded by the last search."""
        return self._last_state.snapshot()

    def inspect(self, coord: Coord) -> CellInfo:
        cell = self._grid.cell(coord)
        score = self._last_state.score(coord)
        return CellInfo(
            x=cell.x,
            y=cell.y,
            weight=cell.weight,
            g=None if score is None else score.g,
            f=None if score is None else score.f,
        )
