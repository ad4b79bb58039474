"""
Doubly linked list addressed by integer handles instead of object references.

Nodes live in one owning list; a Pointer is an index into it. Removed slots go
to a free list and are handed out again by the next insertion, so a Pointer is
only valid until the element it names is removed.
"""

from dataclasses import dataclass
from typing import Generic, Iterator, List, TypeVar

T = TypeVar("T")

_NULL_INDEX = -1


@dataclass(frozen=True)
class Pointer:
    """Handle to a LinkedList slot. Pointer.null() marks "no node"."""
    index: int

    @classmethod
    def null(cls) -> "Pointer":
        return cls(_NULL_INDEX)

    def is_null(self) -> bool:
        return self.index == _NULL_INDEX

    def __repr__(self) -> str:
        return "p-" if self.is_null() else f"p{self.index}"


@dataclass
class _Node(Generic[T]):
    prev: Pointer
    next: Pointer
    elem: T


class LinkedList(Generic[T]):
    """
    Ordered sequence with O(1) insertion and removal at any known Pointer.
    """

    def __init__(self) -> None:
        self._items: List[_Node[T]] = []
        self._freed: List[Pointer] = []
        self.head: Pointer = Pointer.null()
        self.tail: Pointer = Pointer.null()

    def __len__(self) -> int:
        return len(self._items) - len(self._freed)

    def __getitem__(self, ptr: Pointer) -> T:
        return self._node(ptr).elem

    def __iter__(self) -> Iterator[T]:
        ptr = self.head
        while not ptr.is_null():
            node = self._node(ptr)
            yield node.elem
            ptr = node.next

    def _node(self, ptr: Pointer) -> _Node[T]:
        if ptr.is_null():
            raise IndexError("null pointer dereference")
        return self._items[ptr.index]

    def _insert(self, node: _Node[T]) -> Pointer:
        if self._freed:
            ptr = self._freed.pop()
            self._items[ptr.index] = node
            return ptr
        self._items.append(node)
        return Pointer(len(self._items) - 1)

    def push_back(self, elem: T) -> Pointer:
        if self.tail.is_null():
            ptr = self._insert(_Node(Pointer.null(), Pointer.null(), elem))
            self.head = ptr
            self.tail = ptr
            return ptr
        return self.insert_after(self.tail, elem)

    def push_front(self, elem: T) -> Pointer:
        if self.head.is_null():
            return self.push_back(elem)
        return self.insert_before(self.head, elem)

    def insert_after(self, ptr: Pointer, elem: T) -> Pointer:
        nxt = self._node(ptr).next
        new = self._insert(_Node(ptr, nxt, elem))
        self._node(ptr).next = new
        if nxt.is_null():
            self.tail = new
        else:
            self._node(nxt).prev = new
        return new

    def insert_before(self, ptr: Pointer, elem: T) -> Pointer:
        prev = self._node(ptr).prev
        new = self._insert(_Node(prev, ptr, elem))
        self._node(ptr).prev = new
        if prev.is_null():
            self.head = new
        else:
            self._node(prev).next = new
        return new

    def remove(self, ptr: Pointer) -> T:
        """Unlink the node at ptr, free its slot and return its element."""
        node = self._node(ptr)
        if node.prev.is_null():
            self.head = node.next
        else:
            self._node(node.prev).next = node.next
        if node.next.is_null():
            self.tail = node.prev
        else:
            self._node(node.next).prev = node.prev

        self._freed.append(ptr)
        return node.elem

    def drain(self) -> Iterator[T]:
        """Remove and yield elements from the head until the list is empty."""
        while not self.head.is_null():
            yield self.remove(self.head)
