"""
SortingMachine backed by a sequence that is kept sorted on every add.
"""

from collections.abc import Iterator
from typing import TypeVar

from adtkit.interfaces.collaborators import IndexedSequence
from adtkit.interfaces.sorting_machine import SortingMachine
from adtkit.models.collaborators import ListSequence
from adtkit.models.order import Comparator, check_comparator, natural_order

T = TypeVar("T")


def insertion_point(s: IndexedSequence[T], x: T, order: Comparator) -> int:
    """
    Binary search for where x belongs in the sorted sequence s.

    Returns the first position whose entry is strictly greater than x, so x
    lands after every entry it ties with.

    Time complexity: O(log N) comparisons
    """
    low = 0
    high = s.length()

    while low < high:
        mid = (low + high) // 2
        if order(x, s.entry(mid)) < 0:
            high = mid
        else:
            low = mid + 1

    return low


class InsertionSortMachine(SortingMachine[T]):
    """
    Binary insertion-sort implementation of SortingMachine.

    Complexity:
    - add: O(log N) search + O(N) shift
    - change_to_extraction_mode: O(1), entries are already sorted
    - remove_first: removal at position 0
    """

    def __init__(self, order: Comparator = natural_order) -> None:
        self._create_new_rep(check_comparator(order))

    def _create_new_rep(self, order: Comparator) -> None:
        self._insertion_mode: bool = True
        self._order: Comparator = order
        self._entries: IndexedSequence[T] = ListSequence()

    def add(self, x: T) -> None:
        self._check_insertion_mode()
        self._entries.add(insertion_point(self._entries, x, self._order), x)

    def change_to_extraction_mode(self) -> None:
        self._check_insertion_mode()
        self._insertion_mode = False

    def remove_first(self) -> T:
        self._check_can_remove()
        return self._entries.remove(0)

    def size(self) -> int:
        return self._entries.length()

    def order(self) -> Comparator:
        return self._order

    def is_in_insertion_mode(self) -> bool:
        return self._insertion_mode

    def clear(self) -> None:
        self._create_new_rep(self._order)

    def new_instance(self) -> "InsertionSortMachine[T]":
        return InsertionSortMachine(self._order)

    def transfer_from(self, source: SortingMachine[T]) -> None:
        self._check_transfer_source(source, InsertionSortMachine)
        self._insertion_mode = source._insertion_mode
        self._order = source._order
        self._entries = source._entries
        source.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)
