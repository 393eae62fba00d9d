"""Search configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, replace

from gridpath.types import Topology


@dataclass(frozen=True)
class SearchConfig:
    """Immutable settings for a GridPathfinder.

    Attributes:
        topology: Neighbourhood used for adjacency and edge costs.
        heuristic_multiplier: Scale applied to the heuristic (must be >= 0).
    """

    topology: Topology = Topology.VON_NEUMANN
    heuristic_multiplier: float = 1.0

    def __post_init__(self) -> None:
        if self.heuristic_multiplier < 0:
            raise ValueError(
                f"heuristic_multiplier must be >= 0, got {self.heuristic_multiplier}"
            )

    def with_multiplier(self, multiplier: float) -> SearchConfig:
        return replace(self, heuristic_multiplier=multiplier)

    def with_topology(self, topology: Topology) -> SearchConfig:
        return replace(self, topology=topology)
