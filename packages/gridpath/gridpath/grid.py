"""Grid - fixed-size 2D map of terrain weights with cached adjacency."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Iterator

from gridpath.types import (
    IMPASSABLE,
    MAX_WEIGHT,
    Cell,
    Coord,
    InvalidCoordinateError,
    Topology,
)

logger = logging.getLogger(__name__)

Adjacency = tuple[tuple[Coord, ...], ...]


def _clamp(weight: int) -> int:
    return max(0, min(MAX_WEIGHT, int(weight)))


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable copy of a grid's weights plus one adjacency table.

    Searches read from a snapshot so that weight edits made while a search
    is running are not observed half-way through.
    """

    width: int
    height: int
    topology: Topology
    weights: bytes
    adjacency: Adjacency

    def index(self, coord: Coord) -> int:
        return coord[1] * self.width + coord[0]

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord[0] < self.width and 0 <= coord[1] < self.height

    def passable(self, coord: Coord) -> bool:
        return self.weights[self.index(coord)] != IMPASSABLE

    def neighbors(self, coord: Coord) -> tuple[Coord, ...]:
        return self.adjacency[self.index(coord)]


class Grid:
    """Rectangular grid of cells addressed by ``(x, y)``.

    Weights live in a ``bytearray`` in row-major order. Adjacency is built
    once per topology and cached; weight edits never touch it.
    """

    def __init__(
        self,
        width: int,
        height: int,
        topology: Topology = Topology.VON_NEUMANN,
        weight: int = 0,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self._weights = bytearray([_clamp(weight)]) * (width * height)
        self._adjacency: dict[Topology, Adjacency] = {}
        self._lock = threading.Lock()
        self._topology = topology
        self.adjacency(topology)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[str],
        topology: Topology = Topology.VON_NEUMANN,
        wall: str = "#",
    ) -> Grid:
        """Build a grid from strings, one per row. ``wall`` characters are impassable."""
        rows = list(rows)
        if not rows:
            raise ValueError("rows must not be empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        grid = cls(width, len(rows), topology)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch in wall:
                    grid._weights[y * width + x] = IMPASSABLE
        return grid

    # --- Properties ---

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def topology(self) -> Topology:
        return self._topology

    @topology.setter
    def topology(self, topology: Topology) -> None:
        table = self.adjacency(topology)
        with self._lock:
            self._topology = topology
        logger.debug(
            "Grid %dx%d switched to %s (%d adjacency lists)",
            self._width, self._height, topology.value, len(table),
        )

    # --- Lookup ---

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, coord: Coord) -> int:
        x, y = coord
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise InvalidCoordinateError(
                coord,
                f"({x}, {y}) out of bounds for {self._width}x{self._height} grid",
            )
        return y * self._width + x

    def coords(self) -> Iterator[Coord]:
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y)

    def weight(self, coord: Coord) -> int:
        return self._weights[self._index(coord)]

    def passable(self, coord: Coord) -> bool:
        return self._weights[self._index(coord)] != IMPASSABLE

    def cell(self, coord: Coord) -> Cell:
        idx = self._index(coord)
        return Cell(
            x=coord[0],
            y=coord[1],
            weight=self._weights[idx],
            neighbors=self._adjacency[self._topology][idx],
        )

    def neighbors(
        self, coord: Coord, topology: Topology | None = None
    ) -> tuple[Coord, ...]:
        idx = self._index(coord)
        return self.adjacency(topology or self._topology)[idx]

    # --- Mutation ---

    def set_weight(self, coord: Coord, weight: int) -> None:
        """Set the terrain weight, clamped to [0, 255]."""
        idx = self._index(coord)
        with self._lock:
            self._weights[idx] = _clamp(weight)

    def toggle(self, coord: Coord) -> int:
        """Flip a cell between open (0) and impassable (255). Returns the new weight."""
        idx = self._index(coord)
        with self._lock:
            new = IMPASSABLE if self._weights[idx] == 0 else 0
            self._weights[idx] = new
        return new

    def fill_rect(self, corner1: Coord, corner2: Coord, weight: int) -> None:
        """Set every cell in the inclusive rectangle to ``weight``."""
        self._index(corner1)
        self._index(corner2)
        x1, y1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        x2, y2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        value = _clamp(weight)
        with self._lock:
            for y in range(y1, y2 + 1):
                row = y * self._width
                for x in range(x1, x2 + 1):
                    self._weights[row + x] = value

    # --- Adjacency ---

    def adjacency(self, topology: Topology) -> Adjacency:
        """Neighbour lists for every cell under ``topology``, built on first use."""
        table = self._adjacency.get(topology)
        if table is None:
            table = self._build_adjacency(topology)
            with self._lock:
                table = self._adjacency.setdefault(topology, table)
        return table

    def _build_adjacency(self, topology: Topology) -> Adjacency:
        w, h = self._width, self._height
        table: list[tuple[Coord, ...]] = []
        for y in range(h):
            for x in range(w):
                if topology is Topology.VON_NEUMANN:
                    result: list[Coord] = []
                    if x > 0:
                        result.append((x - 1, y))
                    if x < w - 1:
                        result.append((x + 1, y))
                    if y > 0:
                        result.append((x, y - 1))
                    if y < h - 1:
                        result.append((x, y + 1))
                else:
                    result = [
                        (nx, ny)
                        for nx in range(max(0, x - 1), min(w - 1, x + 1) + 1)
                        for ny in range(max(0, y - 1), min(h - 1, y + 1) + 1)
                        if (nx, ny) != (x, y)
                    ]
                table.append(tuple(result))
        logger.debug("Built %s adjacency for %dx%d grid", topology.value, w, h)
        return tuple(table)

    # --- Snapshots ---

    def weights(self) -> bytes:
        with self._lock:
            return bytes(self._weights)

    def snapshot(self, topology: Topology | None = None) -> GridSnapshot:
        """Consistent copy of weights and adjacency for one search."""
        if topology is not None:
            table = self.adjacency(topology)
        with self._lock:
            if topology is None:
                topology = self._topology
                table = self._adjacency[topology]
            weights = bytes(self._weights)
        return GridSnapshot(
            width=self._width,
            height=self._height,
            topology=topology,
            weights=weights,
            adjacency=table,
        )

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, {self._topology.value})"
