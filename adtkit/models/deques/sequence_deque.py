"""
Deque backed by an IndexedSequence collaborator.
"""

from collections.abc import Iterator
from typing import TypeVar

from adtkit.interfaces.collaborators import IndexedSequence
from adtkit.interfaces.deque import Deque
from adtkit.models.collaborators import ListSequence

T = TypeVar("T")


class SequenceDeque(Deque[T]):
    """
    Sequence implementation of Deque.

    Every kernel operation delegates to the sequence: the front is
    position 0 and the back is position length - 1.
    """

    def __init__(self) -> None:
        self._entries: IndexedSequence[T] = ListSequence()

    def length(self) -> int:
        return self._entries.length()

    def push_front(self, x: T) -> None:
        self._entries.add(0, x)

    def push_back(self, x: T) -> None:
        self._entries.add(self._entries.length(), x)

    def pop_front(self) -> T:
        self._check_not_empty()
        return self._entries.remove(0)

    def pop_back(self) -> T:
        self._check_not_empty()
        return self._entries.remove(self._entries.length() - 1)

    def clear(self) -> None:
        self._entries = ListSequence()

    def new_instance(self) -> "SequenceDeque[T]":
        return SequenceDeque()

    def transfer_from(self, source: Deque[T]) -> None:
        self._check_transfer_source(source, SequenceDeque)
        self._entries = source._entries
        source.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)

    def front(self) -> T:
        self._check_not_empty()
        return self._entries.entry(0)

    def back(self) -> T:
        self._check_not_empty()
        return self._entries.entry(self._entries.length() - 1)

    def replace_front(self, x: T) -> T:
        self._check_not_empty()
        return self._entries.replace_entry(0, x)

    def replace_back(self, x: T) -> T:
        self._check_not_empty()
        return self._entries.replace_entry(self._entries.length() - 1, x)
