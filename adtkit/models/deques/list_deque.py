"""
Deque backed by a Python list.

Front at index 0, so pushes and pops at the front shift every entry.
"""

from collections.abc import Iterator
from typing import TypeVar

from adtkit.interfaces.deque import Deque

T = TypeVar("T")


class ListDeque(Deque[T]):
    """
    List implementation of Deque.

    Complexity:
    - push_back / pop_back: O(1) amortized
    - push_front / pop_front: O(N)
    - front / back / replace_*: O(1), read in place
    """

    def __init__(self) -> None:
        self._entries: list[T] = []

    def length(self) -> int:
        return len(self._entries)

    def push_front(self, x: T) -> None:
        self._entries.insert(0, x)

    def push_back(self, x: T) -> None:
        self._entries.append(x)

    def pop_front(self) -> T:
        self._check_not_empty()
        return self._entries.pop(0)

    def pop_back(self) -> T:
        self._check_not_empty()
        return self._entries.pop()

    def clear(self) -> None:
        self._entries = []

    def new_instance(self) -> "ListDeque[T]":
        return ListDeque()

    def transfer_from(self, source: Deque[T]) -> None:
        self._check_transfer_source(source, ListDeque)
        self._entries = source._entries
        source.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)

    def front(self) -> T:
        self._check_not_empty()
        return self._entries[0]

    def back(self) -> T:
        self._check_not_empty()
        return self._entries[-1]

    def replace_front(self, x: T) -> T:
        self._check_not_empty()
        old = self._entries[0]
        self._entries[0] = x
        return old

    def replace_back(self, x: T) -> T:
        self._check_not_empty()
        old = self._entries[-1]
        self._entries[-1] = x
        return old
