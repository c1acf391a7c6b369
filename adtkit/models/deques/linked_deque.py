"""
Doubly linked Deque bounded by two permanent sentinel nodes.

Nodes are stored in an arena list and link to each other by index rather
than by reference. Slots released by pops are recycled through a free list.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

from adtkit.interfaces.deque import Deque

T = TypeVar("T")

# Index of "no node"
NIL = -1


@dataclass
class Node:
    """Arena slot of the linked deque."""

    data: Any = None
    next: int = NIL
    previous: int = NIL


class LinkedDeque(Deque[T]):
    """
    Sentinel-linked implementation of Deque.

    Representation invariants:
    1. pre_front and post_back are the only nodes without data
    2. Following next from pre_front reaches post_back after length + 1 steps
    3. Live nodes = length + 2; every other arena slot is on the free list

    push_front stores x in the current pre_front sentinel and allocates a new
    sentinel in front of it; pop_front advances pre_front onto the first data
    node, which becomes the new sentinel. The back end is symmetric. All four
    kernel operations are O(1).
    """

    def __init__(self) -> None:
        self._create_new_rep()

    def _create_new_rep(self) -> None:
        self._nodes: list[Node] = [Node(next=1), Node(previous=0)]
        self._free: list[int] = []
        self._pre_front: int = 0
        self._post_back: int = 1
        self._length: int = 0

    def length(self) -> int:
        return self._length

    def push_front(self, x: T) -> None:
        new_pre_front = self._allocate()
        old = self._pre_front

        self._nodes[old].data = x
        self._nodes[new_pre_front].next = old
        self._nodes[old].previous = new_pre_front
        self._pre_front = new_pre_front

        self._length += 1

    def push_back(self, x: T) -> None:
        new_post_back = self._allocate()
        old = self._post_back

        self._nodes[old].data = x
        self._nodes[new_post_back].previous = old
        self._nodes[old].next = new_post_back
        self._post_back = new_post_back

        self._length += 1

    def pop_front(self) -> T:
        self._check_not_empty()

        new_pre_front = self._nodes[self._pre_front].next
        node = self._nodes[new_pre_front]
        popped = node.data
        node.data = None
        node.previous = NIL

        self._release(self._pre_front)
        self._pre_front = new_pre_front

        self._length -= 1
        return popped

    def pop_back(self) -> T:
        self._check_not_empty()

        new_post_back = self._nodes[self._post_back].previous
        node = self._nodes[new_post_back]
        popped = node.data
        node.data = None
        node.next = NIL

        self._release(self._post_back)
        self._post_back = new_post_back

        self._length -= 1
        return popped

    def clear(self) -> None:
        self._create_new_rep()

    def new_instance(self) -> "LinkedDeque[T]":
        return LinkedDeque()

    def transfer_from(self, source: Deque[T]) -> None:
        self._check_transfer_source(source, LinkedDeque)
        self._nodes = source._nodes
        self._free = source._free
        self._pre_front = source._pre_front
        self._post_back = source._post_back
        self._length = source._length
        source.clear()

    def __iter__(self) -> Iterator[T]:
        return _LinkedDequeIterator(self._nodes, self._pre_front, self._post_back)

    def arena_size(self) -> int:
        """Return the number of live arena slots, sentinels included."""
        return len(self._nodes) - len(self._free)

    def _allocate(self) -> int:
        """Return the index of an empty, unlinked node."""
        if self._free:
            return self._free.pop()
        self._nodes.append(Node())
        return len(self._nodes) - 1

    def _release(self, index: int) -> None:
        node = self._nodes[index]
        node.data = None
        node.next = NIL
        node.previous = NIL
        self._free.append(index)


class _LinkedDequeIterator(Iterator[Any]):
    """Front-to-back iterator over the data nodes of a LinkedDeque."""

    def __init__(self, nodes: list[Node], pre_front: int, post_back: int) -> None:
        self._nodes = nodes
        self._current = nodes[pre_front].next
        self._post_back = post_back

    def __iter__(self) -> "_LinkedDequeIterator":
        return self

    def __next__(self) -> Any:
        if self._current == self._post_back:
            raise StopIteration

        node = self._nodes[self._current]
        self._current = node.next
        return node.data
