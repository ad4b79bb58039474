"""
Unit tests for BidirectionalDijkstraEngine and the meeting bound.
"""

from adjacency_list_graph import AdjacencyListGraph, invert
from bidirectional_engine import (
    BidirectionalDijkstraEngine,
    bidirectional_shortest_path_cost,
    meeting_bound,
)
from dijkstra_engine import DijkstraSearch


def _example_graph() -> AdjacencyListGraph:
    # 0->2(10), 0->1(1), 1->3(2), 2->1(1), 2->3(3), 2->4(1), 3->0(7), 3->4(2)
    return AdjacencyListGraph.from_adjacency(
        [
            [(2, 10), (1, 1)],
            [(3, 2)],
            [(1, 1), (3, 3), (4, 1)],
            [(0, 7), (4, 2)],
            [],
        ]
    )


def test_bidirectional_example_costs():
    g = _example_graph()
    engine = BidirectionalDijkstraEngine()

    assert engine.shortest_path_cost(g, 0, 1) == 1
    assert engine.shortest_path_cost(g, 0, 3) == 3
    assert engine.shortest_path_cost(g, 3, 0) == 7
    assert engine.shortest_path_cost(g, 0, 4) == 5
    assert engine.shortest_path_cost(g, 4, 0) is None


def test_bidirectional_start_equals_goal_is_zero():
    g = _example_graph()
    for node in g.nodes():
        assert bidirectional_shortest_path_cost(g, node, node) == 0


def test_bidirectional_unreachable_when_goal_has_no_incoming_edges():
    g = AdjacencyListGraph.from_adjacency([[(1, 1)], [(0, 1)], [(0, 1)]])
    assert bidirectional_shortest_path_cost(g, 0, 2) is None


def test_bidirectional_disconnected_components():
    g = AdjacencyListGraph.from_adjacency(
        [
            [(1, 1)],
            [(0, 1)],
            [(3, 1)],
            [(2, 1)],
        ]
    )
    assert bidirectional_shortest_path_cost(g, 0, 3) is None
    assert bidirectional_shortest_path_cost(g, 2, 3) == 1


def test_bidirectional_prefers_long_cheap_path_over_short_expensive_one():
    # 0->5 direct costs 100; the chain 0->1->2->3->4->5 costs 5.
    g = AdjacencyListGraph.from_adjacency(
        [
            [(5, 100), (1, 1)],
            [(2, 1)],
            [(3, 1)],
            [(4, 1)],
            [(5, 1)],
            [],
        ]
    )
    assert bidirectional_shortest_path_cost(g, 0, 5) == 5


def test_bidirectional_all_zero_weights():
    g = AdjacencyListGraph.from_adjacency([[(1, 0)], [(2, 0)], [(3, 0)], []])
    assert bidirectional_shortest_path_cost(g, 0, 3) == 0


def test_meeting_bound_needs_both_frontiers_and_a_common_node():
    g = _example_graph()
    forward = DijkstraSearch(g, 0, 4)
    backward = DijkstraSearch(invert(g), 4, 0)

    # Nothing labelled by both sides yet
    assert meeting_bound(forward, backward) is None

    forward.step()
    backward.step()
    forward.step()
    # forward labels 3 with 3, backward labels 3 with 2, but the pending sum
    # (forward min 3 + backward min 1) is still below 5.
    assert forward.distance(3) == 3
    assert backward.distance(3) == 2
    assert meeting_bound(forward, backward) is None

    backward.step()
    assert meeting_bound(forward, backward) == 5


def test_meeting_bound_with_two_common_nodes():
    """
    After one step each way both 1 and 2 are labelled from both sides
    (totals 3 and 2) and the bound uses both frontier minima (1 + 1).
    """
    # 0->1(1), 1->3(2), 0->2(1), 2->3(1)
    g = AdjacencyListGraph.from_adjacency(
        [
            [(1, 1), (2, 1)],
            [(3, 2)],
            [(3, 1)],
            [],
        ]
    )
    assert bidirectional_shortest_path_cost(g, 0, 3) == 2


def test_meeting_bound_returns_cheapest_total_not_first_qualifying_node():
    """
    Node 0 (total 4) and node 1 (total 2) both pass the bound at the same
    check; the lower id must not win over the cheaper total.
    """
    # start 2, goal 3: 2->0(2), 0->3(2), 2->1(1), 1->3(1)
    g = AdjacencyListGraph.from_adjacency(
        [
            [(3, 2)],
            [(3, 1)],
            [(0, 2), (1, 1)],
            [],
        ]
    )
    forward = DijkstraSearch(g, 2, 3)
    backward = DijkstraSearch(invert(g), 3, 2)
    for _ in range(3):
        assert forward.step() is None
        assert backward.step() is None

    # Pending sum is 2 + 2; node 0's total of 4 also qualifies.
    assert forward.peek_cost() + backward.peek_cost() == 4
    assert forward.distance(0) + backward.distance(0) == 4
    assert forward.distance(1) + backward.distance(1) == 2
    assert meeting_bound(forward, backward) == 2
