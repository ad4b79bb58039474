"""
Utilities to generate seeded random graphs and query workloads.
"""

from typing import List, Tuple
import random

from adjacency_list_graph import AdjacencyListGraph


def build_random_graph(
    num_nodes: int,
    out_degree: int,
    max_cost: int,
    seed: int | None = None,
) -> AdjacencyListGraph:
    """
    Generate a directed graph with a fixed out-degree per node.

    Args:
        num_nodes: number of nodes N; ids are 0..N-1.
        out_degree: edges leaving each node. Targets are drawn uniformly, so
            self-loops and parallel edges can occur.
        max_cost: edge costs are drawn uniformly from [0, max_cost].
        seed: RNG seed for reproducibility.
    """
    if num_nodes <= 0:
        raise ValueError("num_nodes must be positive")
    if out_degree < 0:
        raise ValueError("out_degree must be non-negative")
    if max_cost < 0:
        raise ValueError("max_cost must be non-negative")

    rng = random.Random(seed)
    graph = AdjacencyListGraph(num_nodes)
    for src in range(num_nodes):
        for _ in range(out_degree):
            graph.add_edge(src, rng.randrange(num_nodes), rng.randint(0, max_cost))
    return graph


def random_queries(num_nodes: int, count: int, seed: int | None = None) -> List[Tuple[int, int]]:
    """Draw `count` (start, goal) pairs uniformly over node ids."""
    rng = random.Random(seed)
    return [(rng.randrange(num_nodes), rng.randrange(num_nodes)) for _ in range(count)]
