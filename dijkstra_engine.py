"""
Heap-based Dijkstra for point-to-point shortest-path costs.

DijkstraSearch holds one direction of search state so that the bidirectional
engine can drive two of them one step at a time.
"""

from typing import List, Optional
import logging
import math

from algorithms import ShortestPathEngine
from frontier import Frontier
from graph import Graph

logger = logging.getLogger(__name__)


class DijkstraSearch:
    """
    Single-direction label-setting search from source towards target.

    dist[v] is the best cost found so far (math.inf while unknown). Entries only
    ever decrease, and a node popped at its table cost is final.
    """

    def __init__(self, graph: Graph, source: int, target: int) -> None:
        self.graph = graph
        self.source = source
        self.target = target
        self.dist: List[float] = [math.inf] * graph.num_nodes()
        self.frontier = Frontier()
        # Instrumentation
        self.settled_count = 0
        self.pushes = 0

        self.dist[source] = 0
        self.frontier.push(0, source)
        self.pushes += 1

    @property
    def exhausted(self) -> bool:
        return not self.frontier

    def distance(self, node: int) -> Optional[int]:
        d = self.dist[node]
        return None if d == math.inf else int(d)

    def peek_cost(self) -> int:
        """Smallest pending cost (possibly of a stale entry)."""
        return self.frontier.peek_min().cost

    def step(self) -> Optional[int]:
        """
        Pop one frontier entry and relax it.

        Returns the popped cost when the entry is the target, else None. A step
        on an empty frontier does nothing.
        """
        if not self.frontier:
            return None

        cost, u = self.frontier.pop_min()

        # First pop of the target carries its final cost
        if u == self.target:
            return cost

        # Skip outdated entries
        if cost > self.dist[u]:
            return None

        self.settled_count += 1
        for edge in self.graph.outgoing(u):
            alt = cost + edge.cost
            if alt < self.dist[edge.node]:
                self.dist[edge.node] = alt
                self.frontier.push(alt, edge.node)
                self.pushes += 1
        return None

    def run(self) -> Optional[int]:
        """Step until the target is popped or the frontier drains."""
        while self.frontier:
            found = self.step()
            if found is not None:
                return found
        return None


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Point-to-point Dijkstra using a binary heap with lazy deletion.

    Complexity:
        O(E log E) over the part of the graph closer to start than goal.
    """

    name = "dijkstra"

    def shortest_path_cost(self, graph: Graph, start: int, goal: int) -> Optional[int]:
        if start == goal:
            return 0

        search = DijkstraSearch(graph, start, goal)
        cost = search.run()
        if cost is None:
            logger.debug("dijkstra %d->%d unreachable after %d settled", start, goal, search.settled_count)
        else:
            logger.debug("dijkstra %d->%d cost=%d settled=%d", start, goal, cost, search.settled_count)
        return cost


def shortest_path_cost(graph: Graph, start: int, goal: int) -> Optional[int]:
    """Functional shortcut for SimpleDijkstraEngine().shortest_path_cost."""
    return SimpleDijkstraEngine().shortest_path_cost(graph, start, goal)
