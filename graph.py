"""
Directed, weighted graph abstraction for shortest-path search.

Nodes are dense integer ids in [0, num_nodes()).
Edges are directed: u -> Edge(node=v, cost=c) with a non-negative integer cost.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Edge:
    """
    Outgoing edge stored in its source's adjacency list.
    """
    node: int
    cost: int


class Graph(ABC):
    """Directed, weighted graph over dense integer node ids."""

    @abstractmethod
    def num_nodes(self) -> int:
        """Return N; valid node ids are 0..N-1."""
        raise NotImplementedError

    def nodes(self) -> Iterable[int]:
        """Return all node ids in ascending order."""
        return range(self.num_nodes())

    @abstractmethod
    def outgoing(self, node: int) -> Sequence[Edge]:
        """
        Outgoing edges of a node, in insertion order.

        Multi-edges and self-loops are returned as stored.
        """
        raise NotImplementedError
