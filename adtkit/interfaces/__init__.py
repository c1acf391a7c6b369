"""
Abstract base classes for the data-structure components.
"""

from adtkit.interfaces.collaborators import IndexedSequence, Queue, Stack
from adtkit.interfaces.deque import Deque, DequeKernel
from adtkit.interfaces.sorting_machine import SortingMachine, SortingMachineKernel

__all__ = [
    "IndexedSequence",
    "Queue",
    "Stack",
    "Deque",
    "DequeKernel",
    "SortingMachine",
    "SortingMachineKernel",
]
