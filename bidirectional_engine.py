"""
Bidirectional Dijkstra: forward search over the graph, backward search over its
inversion, advanced in lockstep until the meeting bound proves optimality.
"""

from typing import Optional
import logging
import math

from adjacency_list_graph import invert
from algorithms import ShortestPathEngine
from dijkstra_engine import DijkstraSearch
from graph import Graph

logger = logging.getLogger(__name__)


def meeting_bound(forward: DijkstraSearch, backward: DijkstraSearch) -> Optional[int]:
    """
    Return the proven shortest cost if the two searches have met, else None.

    mu is the cheapest forward + backward total over nodes labelled by both
    searches. Any path not yet accounted for costs at least the sum of the two
    frontier minima, so mu <= that sum makes mu optimal. Both frontiers must be
    non-empty for the check to apply. Costs are non-negative in both directions.

    Scans every node: O(N) per call.
    """
    if not forward.frontier or not backward.frontier:
        return None

    pending = forward.peek_cost() + backward.peek_cost()
    mu = min(f + b for f, b in zip(forward.dist, backward.dist))
    if mu == math.inf or mu > pending:
        return None
    return int(mu)


class BidirectionalDijkstraEngine(ShortestPathEngine):
    """
    Meet-in-the-middle Dijkstra.

    Each round takes one forward step, checks the meeting bound, takes one
    backward step and checks again. Either direction popping the opposite
    endpoint also ends the search with that cost.
    """

    name = "bidirectional"

    def shortest_path_cost(self, graph: Graph, start: int, goal: int) -> Optional[int]:
        if start == goal:
            return 0

        forward = DijkstraSearch(graph, start, goal)
        backward = DijkstraSearch(invert(graph), goal, start)

        while forward.frontier or backward.frontier:
            for label, search in (("forward", forward), ("backward", backward)):
                found = search.step()
                if found is not None:
                    logger.debug("bidirectional %d->%d: %s search hit endpoint, cost=%d", start, goal, label, found)
                    return found

                # A drained direction has seen everything it can reach
                if search.exhausted:
                    logger.debug("bidirectional %d->%d: %s search exhausted", start, goal, label)
                    return None

                met = meeting_bound(forward, backward)
                if met is not None:
                    logger.debug(
                        "bidirectional %d->%d: meeting bound reached, cost=%d settled=%d+%d",
                        start,
                        goal,
                        met,
                        forward.settled_count,
                        backward.settled_count,
                    )
                    return met

        return None


def bidirectional_shortest_path_cost(graph: Graph, start: int, goal: int) -> Optional[int]:
    """Functional shortcut for BidirectionalDijkstraEngine().shortest_path_cost."""
    return BidirectionalDijkstraEngine().shortest_path_cost(graph, start, goal)
