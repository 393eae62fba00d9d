"""SearchState - per-search bookkeeping kept outside the grid."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from gridpath.types import Coord, NodeScore


class SearchState:
    """Scores, predecessors and the closed set for a single search.

    Keyed by coordinate. A state belongs to one search at a time; call
    ``reset()`` before reusing it.
    """

    def __init__(self) -> None:
        self._scores: dict[Coord, NodeScore] = {}
        self._previous: dict[Coord, Coord] = {}
        self._closed: set[Coord] = set()
        self.expanded = 0

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, coord: object) -> bool:
        return coord in self._scores

    def record(
        self, coord: Coord, g: float, h: float, previous: Coord | None = None
    ) -> NodeScore:
        score = NodeScore(g=g, h=h)
        self._scores[coord] = score
        if previous is None:
            self._previous.pop(coord, None)
        else:
            self._previous[coord] = previous
        return score

    def score(self, coord: Coord) -> NodeScore | None:
        return self._scores.get(coord)

    def previous(self, coord: Coord) -> Coord | None:
        return self._previous.get(coord)

    def close(self, coord: Coord) -> None:
        self._closed.add(coord)
        self.expanded += 1

    def is_closed(self, coord: Coord) -> bool:
        return coord in self._closed

    def closed(self) -> frozenset[Coord]:
        return frozenset(self._closed)

    def reconstruct(self, goal: Coord) -> list[Coord]:
        """Follow predecessor links back from ``goal`` and return start..goal."""
        if goal not in self._scores:
            raise KeyError(f"{goal} was never reached")
        path = [goal]
        current = goal
        while current in self._previous:
            current = self._previous[current]
            path.append(current)
        path.reverse()
        return path

    def snapshot(self) -> Mapping[Coord, NodeScore]:
        """Read-only copy of the scores recorded so far."""
        return MappingProxyType(dict(self._scores))

    def reset(self) -> None:
        self._scores.clear()
        self._previous.clear()
        self._closed.clear()
        self.expanded = 0
