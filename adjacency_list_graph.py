"""
Concrete directed, weighted graph backed by a list of adjacency lists.

Also provides graph inversion, used by the backward half of bidirectional search.
"""

from typing import Iterator, List, Sequence, Tuple

from graph import Edge, Graph


class AdjacencyListGraph(Graph):
    """
    Directed graph stored as adjacency[node] -> [Edge, ...].

    Edge targets are trusted to be < num_nodes(); searches do not re-check them.
    """

    def __init__(self, num_nodes: int = 0) -> None:
        if num_nodes < 0:
            raise ValueError("num_nodes must be non-negative")
        self._adj: List[List[Edge]] = [[] for _ in range(num_nodes)]

    @classmethod
    def from_adjacency(cls, adjacency: Sequence[Sequence[Tuple[int, int]]]) -> "AdjacencyListGraph":
        """
        Build a graph from plain lists: adjacency[u] = [(v, cost), ...].
        """
        graph = cls(len(adjacency))
        for src, edges in enumerate(adjacency):
            for dst, cost in edges:
                graph.add_edge(src, dst, cost)
        return graph

    # --- Mutation API (construction only, not part of Graph interface) -------

    def add_node(self) -> int:
        """Append an isolated node and return its id."""
        self._adj.append([])
        return len(self._adj) - 1

    def add_edge(self, src: int, dst: int, cost: int) -> None:
        """
        Append a directed edge src -> dst.

        Parallel edges are kept side by side; nothing is merged.
        """
        if cost < 0:
            raise ValueError(f"Edge {src}->{dst} has negative cost {cost}")
        self._adj[src].append(Edge(dst, cost))

    # --- Graph interface -----------------------------------------------------

    def num_nodes(self) -> int:
        return len(self._adj)

    def outgoing(self, node: int) -> Sequence[Edge]:
        return self._adj[node]

    # --- Helpers -------------------------------------------------------------

    def edges(self) -> Iterator[Tuple[int, Edge]]:
        """Yield (src, edge) for every edge, sources in ascending order."""
        for src, edges in enumerate(self._adj):
            for edge in edges:
                yield src, edge

    def num_edges(self) -> int:
        return sum(len(edges) for edges in self._adj)

    def to_adjacency(self) -> List[List[Tuple[int, int]]]:
        """Inverse of from_adjacency."""
        return [[(e.node, e.cost) for e in edges] for edges in self._adj]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyListGraph):
            return NotImplemented
        return self._adj == other._adj

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(nodes={self.num_nodes()}, edges={self.num_edges()})"


def invert(graph: Graph) -> AdjacencyListGraph:
    """
    Return the reverse graph: every edge u -> v (cost c) becomes v -> u (cost c).

    Sources are visited in ascending order, so each inverted adjacency list is
    sorted by original source id. Multi-edges survive as separate edges.
    """
    n = graph.num_nodes()
    inverted = AdjacencyListGraph(n)
    for src in range(n):
        for edge in graph.outgoing(src):
            inverted.add_edge(edge.node, src, edge.cost)
    return inverted
