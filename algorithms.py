"""
Algorithm interfaces for point-to-point shortest paths.

Keeps search strategies separate from graph storage and experiment wiring.
"""

from abc import ABC, abstractmethod
from typing import Optional

from graph import Graph


class ShortestPathEngine(ABC):
    """
    Interface for point-to-point shortest-path cost queries.

    Engines keep no per-query state, so one instance can serve any number of
    independent searches.
    """

    name: str = "abstract"

    @abstractmethod
    def shortest_path_cost(self, graph: Graph, start: int, goal: int) -> Optional[int]:
        """
        Compute the cost of a cheapest directed path start -> goal.

        Returns:
            The path cost, or None when goal is unreachable from start.
        """
        raise NotImplementedError
