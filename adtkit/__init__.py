"""
Interchangeable data-structure representations behind shared contracts.

This package provides two abstract types, each with a kernel contract, a
secondary layer written once against that kernel, and several
representations that can be swapped freely:
- Deque: ListDeque, SequenceDeque, TwoStackDeque, LinkedDeque
- SortingMachine: MergeSortMachine, SelectionSortMachine, InsertionSortMachine
"""

from adtkit.interfaces import Deque, SortingMachine
from adtkit.factory import (
    DequeKind,
    SortingMachineKind,
    create_deque,
    create_sorting_machine,
)
from adtkit.models import PreconditionViolation, natural_order
from adtkit.models.deques import LinkedDeque, ListDeque, SequenceDeque, TwoStackDeque
from adtkit.models.sortingmachines import (
    InsertionSortMachine,
    MergeSortMachine,
    SelectionSortMachine,
)

__all__ = [
    "Deque",
    "SortingMachine",
    "DequeKind",
    "SortingMachineKind",
    "create_deque",
    "create_sorting_machine",
    "PreconditionViolation",
    "natural_order",
    "LinkedDeque",
    "ListDeque",
    "SequenceDeque",
    "TwoStackDeque",
    "InsertionSortMachine",
    "MergeSortMachine",
    "SelectionSortMachine",
]
