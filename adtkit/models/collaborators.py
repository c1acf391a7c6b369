"""
List-backed implementations of the collaborator contracts.
"""

from collections import deque
from collections.abc import Iterator
from typing import TypeVar

from adtkit.interfaces.collaborators import IndexedSequence, Queue, Stack
from adtkit.models.exceptions import PreconditionViolation

T = TypeVar("T")


class ListQueue(Queue[T]):
    """Queue backed by collections.deque."""

    def __init__(self) -> None:
        self._entries: deque[T] = deque()

    def enqueue(self, x: T) -> None:
        self._entries.append(x)

    def dequeue(self) -> T:
        if not self._entries:
            raise PreconditionViolation("this /= <>")
        return self._entries.popleft()

    def front(self) -> T:
        if not self._entries:
            raise PreconditionViolation("this /= <>")
        return self._entries[0]

    def length(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries = deque()

    def new_instance(self) -> "ListQueue[T]":
        return ListQueue()

    def transfer_from(self, source: Queue[T]) -> None:
        if source is self:
            raise PreconditionViolation("source is not this")
        if not isinstance(source, ListQueue):
            raise PreconditionViolation("source is of dynamic type ListQueue")

        self._entries = source._entries
        source.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)


class ListStack(Stack[T]):
    """Stack backed by a list, top at the end of the list."""

    def __init__(self) -> None:
        self._entries: list[T] = []

    def push(self, x: T) -> None:
        self._entries.append(x)

    def pop(self) -> T:
        if not self._entries:
            raise PreconditionViolation("this /= <>")
        return self._entries.pop()

    def length(self) -> int:
        return len(self._entries)

    def flip(self) -> None:
        self._entries.reverse()

    def __iter__(self) -> Iterator[T]:
        return reversed(self._entries)


class ListSequence(IndexedSequence[T]):
    """Indexed sequence backed by a list."""

    def __init__(self) -> None:
        self._entries: list[T] = []

    def add(self, pos: int, x: T) -> None:
        if not 0 <= pos <= len(self._entries):
            raise PreconditionViolation("0 <= pos <= |this|")
        self._entries.insert(pos, x)

    def remove(self, pos: int) -> T:
        self._check_position(pos)
        return self._entries.pop(pos)

    def entry(self, pos: int) -> T:
        self._check_position(pos)
        return self._entries[pos]

    def replace_entry(self, pos: int, x: T) -> T:
        self._check_position(pos)
        old = self._entries[pos]
        self._entries[pos] = x
        return old

    def length(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos < len(self._entries):
            raise PreconditionViolation("0 <= pos < |this|")
