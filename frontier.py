"""
Min-priority frontier for label-setting search.
"""

from typing import List, NamedTuple
import heapq


class FrontierEntry(NamedTuple):
    """Pending (accumulated cost, node) pair; tuple order gives cost-then-id ties."""
    cost: int
    node: int


class Frontier:
    """
    Binary-heap frontier without decrease-key.

    A node may sit in the heap several times with different costs. Callers
    must check each popped entry against their distance table and drop the
    stale ones.
    """

    def __init__(self) -> None:
        self._heap: List[FrontierEntry] = []

    def push(self, cost: int, node: int) -> None:
        heapq.heappush(self._heap, FrontierEntry(cost, node))

    def pop_min(self) -> FrontierEntry:
        """Remove and return the cheapest entry. Raises IndexError when empty."""
        return heapq.heappop(self._heap)

    def peek_min(self) -> FrontierEntry:
        """Cheapest entry without removing it. Raises IndexError when empty."""
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
