"""
SortingMachine backed by a queue and sorted by top-down merge sort.
"""

import logging
from collections.abc import Iterator
from typing import TypeVar

from adtkit.interfaces.collaborators import Queue
from adtkit.interfaces.sorting_machine import SortingMachine
from adtkit.models.collaborators import ListQueue
from adtkit.models.order import Comparator, check_comparator, natural_order

T = TypeVar("T")

logger = logging.getLogger(__name__)


def merge(q1: Queue[T], q2: Queue[T], merged: Queue[T], order: Comparator) -> None:
    """
    Merge two sorted queues into merged, emptying both.

    On ties the entry from q1 goes first, which keeps the sort stable.

    Args:
        q1: Queue sorted by order.
        q2: Queue sorted by order.
        merged: Receives the merged entries; its old contents are discarded.
        order: The ordering q1 and q2 are sorted by.
    """
    merged.clear()

    while q1.length() > 0 and q2.length() > 0:
        if order(q2.front(), q1.front()) < 0:
            merged.enqueue(q2.dequeue())
        else:
            merged.enqueue(q1.dequeue())

    while q1.length() > 0:
        merged.enqueue(q1.dequeue())
    while q2.length() > 0:
        merged.enqueue(q2.dequeue())


def sort(q: Queue[T], order: Comparator) -> None:
    """
    Sort q in place with top-down merge sort. O(N log N)

    The first half gets ceil(N/2) entries and the second floor(N/2).
    """
    if q.length() <= 1:
        return

    q1 = q.new_instance()
    q2 = q.new_instance()

    while q.length() > q1.length():
        q1.enqueue(q.dequeue())
    q2.transfer_from(q)

    sort(q1, order)
    sort(q2, order)

    merge(q1, q2, q, order)


class MergeSortMachine(SortingMachine[T]):
    """
    Queue implementation of SortingMachine.

    Complexity:
    - add: O(1), entries queue up unsorted
    - change_to_extraction_mode: O(N log N) merge sort
    - remove_first: O(1) dequeue
    """

    def __init__(self, order: Comparator = natural_order) -> None:
        self._create_new_rep(check_comparator(order))

    def _create_new_rep(self, order: Comparator) -> None:
        self._insertion_mode: bool = True
        self._order: Comparator = order
        self._entries: Queue[T] = ListQueue()

    def add(self, x: T) -> None:
        self._check_insertion_mode()
        self._entries.enqueue(x)

    def change_to_extraction_mode(self) -> None:
        self._check_insertion_mode()

        self._insertion_mode = False
        logger.debug("Merge sorting %d entries", self._entries.length())
        sort(self._entries, self._order)

    def remove_first(self) -> T:
        self._check_can_remove()
        return self._entries.dequeue()

    def size(self) -> int:
        return self._entries.length()

    def order(self) -> Comparator:
        return self._order

    def is_in_insertion_mode(self) -> bool:
        return self._insertion_mode

    def clear(self) -> None:
        self._create_new_rep(self._order)

    def new_instance(self) -> "MergeSortMachine[T]":
        return MergeSortMachine(self._order)

    def transfer_from(self, source: SortingMachine[T]) -> None:
        self._check_transfer_source(source, MergeSortMachine)
        self._insertion_mode = source._insertion_mode
        self._order = source._order
        self._entries = source._entries
        source.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)
