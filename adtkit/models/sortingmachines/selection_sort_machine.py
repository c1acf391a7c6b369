"""
SortingMachine backed by a sequence, extracting by selection.
"""

from collections.abc import Iterator
from typing import TypeVar

from adtkit.interfaces.collaborators import IndexedSequence
from adtkit.interfaces.sorting_machine import SortingMachine
from adtkit.models.collaborators import ListSequence
from adtkit.models.order import Comparator, check_comparator, natural_order

T = TypeVar("T")


def remove_min(s: IndexedSequence[T], order: Comparator) -> T:
    """
    Remove and return the first minimal entry of a non-empty sequence. O(N)
    """
    smallest = 0
    for i in range(1, s.length()):
        # Strict comparison keeps the first of several equal minima
        if order(s.entry(i), s.entry(smallest)) < 0:
            smallest = i

    return s.remove(smallest)


class SelectionSortMachine(SortingMachine[T]):
    """
    Selection-sort implementation of SortingMachine.

    Entries stay in insertion order; all ordering work is deferred to
    remove_first, which scans for the minimum each time. The mode switch
    does no work, so iteration in extraction mode is not sorted.
    """

    def __init__(self, order: Comparator = natural_order) -> None:
        self._create_new_rep(check_comparator(order))

    def _create_new_rep(self, order: Comparator) -> None:
        self._insertion_mode: bool = True
        self._order: Comparator = order
        self._entries: IndexedSequence[T] = ListSequence()

    def add(self, x: T) -> None:
        self._check_insertion_mode()
        self._entries.add(self._entries.length(), x)

    def change_to_extraction_mode(self) -> None:
        self._check_insertion_mode()
        self._insertion_mode = False

    def remove_first(self) -> T:
        self._check_can_remove()
        return remove_min(self._entries, self._order)

    def size(self) -> int:
        return self._entries.length()

    def order(self) -> Comparator:
        return self._order

    def is_in_insertion_mode(self) -> bool:
        return self._insertion_mode

    def clear(self) -> None:
        self._create_new_rep(self._order)

    def new_instance(self) -> "SelectionSortMachine[T]":
        return SelectionSortMachine(self._order)

    def transfer_from(self, source: SortingMachine[T]) -> None:
        self._check_transfer_source(source, SelectionSortMachine)
        self._insertion_mode = source._insertion_mode
        self._order = source._order
        self._entries = source._entries
        source.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)
