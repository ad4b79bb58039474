"""
Growable ring-buffer FIFO queue.
"""

from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class BoundedFIFO(Generic[T]):
    """
    First-in, first-out queue over a circular buffer.

    The buffer starts at `capacity` slots and doubles when full, so pushes
    never fail. Popped slots are reused by later pushes.
    """

    def __init__(self, capacity: int = 4) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._buf: List[Optional[T]] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def first(self) -> T:
        """Front element without removing it. Raises IndexError when empty."""
        if self._size == 0:
            raise IndexError("first() on empty BoundedFIFO")
        return self._buf[self._head]  # type: ignore[return-value]

    def __getitem__(self, index: int) -> T:
        """Element `index` positions behind the front; negative counts from the back."""
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("BoundedFIFO index out of range")
        return self._buf[(self._head + index) % len(self._buf)]  # type: ignore[return-value]

    def push_back(self, elem: T) -> None:
        if self._size == len(self._buf):
            self._grow()
        tail = (self._head + self._size) % len(self._buf)
        self._buf[tail] = elem
        self._size += 1

    def pop_front(self) -> Optional[T]:
        """Remove and return the front element, or None when empty."""
        if self._size == 0:
            return None
        elem = self._buf[self._head]
        self._buf[self._head] = None
        self._head = (self._head + 1) % len(self._buf)
        self._size -= 1
        return elem

    def __iter__(self) -> Iterator[T]:
        cap = len(self._buf)
        for i in range(self._size):
            yield self._buf[(self._head + i) % cap]  # type: ignore[misc]

    def _grow(self) -> None:
        # Unroll so the head lands at slot 0 of the larger buffer
        items = list(self)
        self._buf = items + [None] * len(items)
        self._head = 0

    def __repr__(self) -> str:
        return f"BoundedFIFO({list(self)!r})"
