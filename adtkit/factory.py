"""
Factories that pick a representation from a closed set of variants.
"""

from collections.abc import Callable
from enum import Enum

from adtkit.interfaces.deque import Deque
from adtkit.interfaces.sorting_machine import SortingMachine
from adtkit.models.deques import LinkedDeque, ListDeque, SequenceDeque, TwoStackDeque
from adtkit.models.order import Comparator, natural_order
from adtkit.models.sortingmachines import (
    InsertionSortMachine,
    MergeSortMachine,
    SelectionSortMachine,
)


class DequeKind(Enum):
    """Deque representations."""

    LIST = "list"
    SEQUENCE = "sequence"
    TWO_STACK = "two_stack"
    LINKED = "linked"


class SortingMachineKind(Enum):
    """SortingMachine representations."""

    MERGE = "merge"
    SELECTION = "selection"
    INSERTION = "insertion"


DEFAULT_DEQUE_KIND = DequeKind.LIST
DEFAULT_SORTING_MACHINE_KIND = SortingMachineKind.MERGE

# Representations every other one is checked against
REFERENCE_DEQUE_KIND = DequeKind.LIST
REFERENCE_SORTING_MACHINE_KIND = SortingMachineKind.MERGE

_DEQUES: dict[DequeKind, Callable[[], Deque]] = {
    DequeKind.LIST: ListDeque,
    DequeKind.SEQUENCE: SequenceDeque,
    DequeKind.TWO_STACK: TwoStackDeque,
    DequeKind.LINKED: LinkedDeque,
}

_SORTING_MACHINES: dict[SortingMachineKind, Callable[[Comparator], SortingMachine]] = {
    SortingMachineKind.MERGE: MergeSortMachine,
    SortingMachineKind.SELECTION: SelectionSortMachine,
    SortingMachineKind.INSERTION: InsertionSortMachine,
}


def create_deque(kind: DequeKind | str = DEFAULT_DEQUE_KIND) -> Deque:
    """
    Create an empty deque.

    Args:
        kind: A DequeKind or its string value, e.g. "two_stack".

    Returns:
        A new empty deque of the requested representation.

    Raises:
        ValueError: If kind names no known representation.
    """
    return _DEQUES[DequeKind(kind)]()


def create_sorting_machine(
    order: Comparator = natural_order,
    kind: SortingMachineKind | str = DEFAULT_SORTING_MACHINE_KIND,
) -> SortingMachine:
    """
    Create an empty sorting machine in insertion mode.

    Args:
        order: Comparator defining the total preorder.
        kind: A SortingMachineKind or its string value, e.g. "insertion".

    Returns:
        A new sorting machine of the requested representation.

    Raises:
        ValueError: If kind names no known representation.
        TypeError: If order is not callable.
    """
    return _SORTING_MACHINES[SortingMachineKind(kind)](order)
