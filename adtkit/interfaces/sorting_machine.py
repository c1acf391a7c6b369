"""
SortingMachine kernel contract and its secondary layer.

A sorting machine is a two-phase container: entries are added in insertion
mode, then after a one-way switch to extraction mode they come back out
smallest first under a fixed ordering.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from adtkit.models.exceptions import PreconditionViolation
from adtkit.models.order import Comparator

T = TypeVar("T")


class SortingMachineKernel(ABC, Generic[T]):
    """
    Abstract base class for sorting machines.

    Mathematically a triple (insertion_mode, order, contents) where order is
    a total preorder fixed at construction and contents is a finite
    multiset. Implementations:
    - MergeSortMachine: queue, merge sort at the mode switch
    - SelectionSortMachine: sequence, selection on every remove_first
    - InsertionSortMachine: sequence kept sorted by binary insertion
    """

    @abstractmethod
    def add(self, x: T) -> None:
        """
        Add x to the contents.

        Args:
            x: The entry to add.

        Raises:
            PreconditionViolation: If not in insertion mode.
        """
        pass

    @abstractmethod
    def change_to_extraction_mode(self) -> None:
        """
        Switch from insertion mode to extraction mode. Irreversible.

        Raises:
            PreconditionViolation: If already in extraction mode.
        """
        pass

    @abstractmethod
    def remove_first(self) -> T:
        """
        Remove and return a minimal entry under order().

        Among entries that tie with the minimum, which one is returned is
        representation-specific.

        Raises:
            PreconditionViolation: If in insertion mode or empty.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of entries.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def order(self) -> Comparator:
        """Return the ordering this machine was built with."""
        pass

    @abstractmethod
    def is_in_insertion_mode(self) -> bool:
        pass

    @abstractmethod
    def clear(self) -> None:
        """Reset to insertion mode with no entries, keeping the order."""
        pass

    @abstractmethod
    def new_instance(self) -> "SortingMachine[T]":
        """Return a new empty machine of the same representation and order."""
        pass

    @abstractmethod
    def transfer_from(self, source: "SortingMachine[T]") -> None:
        """
        Move mode, order and contents of source into this machine.

        Source is reset to insertion mode, empty, with its own order.

        Raises:
            PreconditionViolation: If source is self or of another
                representation.
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """
        Iterate the contents in backing-storage order.

        The order is only guaranteed to be sorted where the representation
        keeps its storage sorted.
        """
        pass

    def __len__(self) -> int:
        return self.size()

    def _check_transfer_source(self, source: object, representation: type) -> None:
        if source is self:
            raise PreconditionViolation("source is not this")
        if not isinstance(source, representation):
            raise PreconditionViolation(
                f"source is of dynamic type {representation.__name__}"
            )

    def _check_insertion_mode(self) -> None:
        if not self.is_in_insertion_mode():
            raise PreconditionViolation("this.insertion_mode")

    def _check_can_remove(self) -> None:
        if self.is_in_insertion_mode():
            raise PreconditionViolation("not this.insertion_mode")
        if self.size() == 0:
            raise PreconditionViolation("this.contents /= {}")


class SortingMachine(SortingMachineKernel[T]):
    """
    Secondary layer for sorting machines, written against the kernel only.
    """

    def add_all(self, items: Iterable[T]) -> None:
        """
        Add every entry of items.

        Raises:
            PreconditionViolation: If not in insertion mode.
        """
        self._check_insertion_mode()
        for x in items:
            self.add(x)

    def extract_all(self) -> list[T]:
        """
        Remove every entry, smallest first.

        Returns:
            The removed entries, non-decreasing under order().

        Raises:
            PreconditionViolation: If in insertion mode.
        """
        if self.is_in_insertion_mode():
            raise PreconditionViolation("not this.insertion_mode")

        extracted: list[T] = []
        while self.size() > 0:
            extracted.append(self.remove_first())
        return extracted

    def __eq__(self, other: object) -> bool:
        """Same mode, same order, and the same multiset of entries."""
        if other is self:
            return True
        if not isinstance(other, SortingMachine):
            return NotImplemented
        if (
            self.is_in_insertion_mode() != other.is_in_insertion_mode()
            or self.order() is not other.order()
            or self.size() != other.size()
        ):
            return False

        # Multiset comparison without requiring hashable entries
        remaining = list(other)
        for x in self:
            for i, y in enumerate(remaining):
                if x == y:
                    del remaining[i]
                    break
            else:
                return False
        return not remaining

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        entries = ",".join(str(x) for x in self)
        return f"({self.is_in_insertion_mode()},{{{entries}}})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self}"
