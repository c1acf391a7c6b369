"""
SortingMachine representations.
"""

from adtkit.models.sortingmachines.insertion_sort_machine import InsertionSortMachine
from adtkit.models.sortingmachines.merge_sort_machine import MergeSortMachine
from adtkit.models.sortingmachines.selection_sort_machine import SelectionSortMachine

__all__ = ["InsertionSortMachine", "MergeSortMachine", "SelectionSortMachine"]
