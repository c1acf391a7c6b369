"""
Comparators used as the ordering relation of a SortingMachine.

A comparator takes two entries and returns a negative number, zero, or a
positive number, the same shape functools.cmp_to_key consumes.
"""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare using the entries' own < operator."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    """Natural order, reversed."""
    return natural_order(b, a)


def by_key(key: Callable[[Any], Any]) -> Comparator:
    """
    Build a comparator that orders entries by key(entry).

    Entries with equal keys compare as ties, so the result is a total
    preorder even when entries themselves are not comparable.
    """

    def compare(a: Any, b: Any) -> int:
        return natural_order(key(a), key(b))

    return compare


def check_comparator(order: Any) -> Comparator:
    """
    Validate that order can be used as a comparator.

    Raises:
        TypeError: If order is not callable.
    """
    if not callable(order):
        raise TypeError(f"order must be callable, got {type(order).__name__}")
    return order
