"""Shared types, constants and exceptions for gridpath."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]

# Terrain weight that marks a cell as impassable.
IMPASSABLE = 255
MAX_WEIGHT = 255


class Topology(Enum):
    """Neighbourhood used to connect grid cells."""

    VON_NEUMANN = "von_neumann"
    MOORE = "moore"


@dataclass(frozen=True)
class Cell:
    """Read-only view of one grid position.

    Attributes:
        x: Column index.
        y: Row index.
        weight: Terrain weight in [0, 255]; 255 means impassable.
        neighbors: Adjacent coordinates under the grid's current topology.
    """

    x: int
    y: int
    weight: int
    neighbors: tuple[Coord, ...] = ()

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    @property
    def passable(self) -> bool:
        return self.weight != IMPASSABLE


@dataclass(frozen=True)
class NodeScore:
    """Cost bookkeeping for one visited cell."""

    g: float
    h: float

    @property
    def f(self) -> float:
        return self.g + self.h


class InvalidCoordinateError(ValueError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, coord: Coord, message: str) -> None:
        self.coord = coord
        super().__init__(message)


class FrontierEmptyError(IndexError):
    """Raised when taking from an empty frontier."""


class HeapInvariantError(AssertionError):
    """Raised by PriorityFrontier.check() when heap order is broken."""


class SearchCancelled(Exception):
    """Raised when a search is stopped by its cancel callable."""
