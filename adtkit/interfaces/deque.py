"""
Deque kernel contract and its secondary layer.

DequeKernel declares the primitive operations every representation must
provide. Deque layers the derived operations on top of them, using nothing
but kernel calls, so any representation can be swapped in underneath.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from adtkit.models.exceptions import PreconditionViolation

T = TypeVar("T")


class DequeKernel(ABC, Generic[T]):
    """
    Abstract base class for double-ended sequences.

    Mathematically a deque is a finite string of entries <e0,...,en-1>,
    front at e0. Implementations:
    - ListDeque: Python list, front at index 0
    - SequenceDeque: IndexedSequence collaborator
    - TwoStackDeque: pair of Stack collaborators
    - LinkedDeque: sentinel-bounded doubly linked nodes in an index arena
    """

    @abstractmethod
    def length(self) -> int:
        """
        Return the number of entries.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def push_front(self, x: T) -> None:
        """
        Add x at the front.

        Args:
            x: The entry to add.
        """
        pass

    @abstractmethod
    def push_back(self, x: T) -> None:
        """
        Add x at the back.

        Args:
            x: The entry to add.
        """
        pass

    @abstractmethod
    def pop_front(self) -> T:
        """
        Remove and return the front entry.

        Returns:
            The removed entry.

        Raises:
            PreconditionViolation: If the deque is empty.
        """
        pass

    @abstractmethod
    def pop_back(self) -> T:
        """
        Remove and return the back entry.

        Returns:
            The removed entry.

        Raises:
            PreconditionViolation: If the deque is empty.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Reset to the empty deque."""
        pass

    @abstractmethod
    def new_instance(self) -> "Deque[T]":
        """Return a new empty deque of the same representation."""
        pass

    @abstractmethod
    def transfer_from(self, source: "Deque[T]") -> None:
        """
        Move the whole state of source into this deque.

        Source is left empty. This is a move, not a copy: afterwards no two
        instances share backing storage.

        Args:
            source: A deque of the same representation, not self.

        Raises:
            PreconditionViolation: If source is self or of another
                representation.
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """
        Return a single-pass iterator from front to back.

        Mutating the deque while iterating is undefined.
        """
        pass

    def __len__(self) -> int:
        return self.length()

    def _check_transfer_source(self, source: object, representation: type) -> None:
        """Validate the source of transfer_from before any state moves."""
        if source is self:
            raise PreconditionViolation("source is not this")
        if not isinstance(source, representation):
            raise PreconditionViolation(
                f"source is of dynamic type {representation.__name__}"
            )

    def _check_not_empty(self) -> None:
        if self.length() == 0:
            raise PreconditionViolation("this /= <>")


class Deque(DequeKernel[T]):
    """
    Secondary layer for deques.

    Every method here is written against the kernel only. Representations
    with cheap indexed access may override front/back/replace_* with direct
    reads, provided the observable behavior stays the same.
    """

    def flip(self) -> None:
        """Reverse the deque in place. O(N) kernel calls."""
        popped: list[T] = []
        while self.length() > 0:
            popped.append(self.pop_front())
        for x in popped:
            self.push_front(x)

    def front(self) -> T:
        """
        Return the front entry without net change.

        Raises:
            PreconditionViolation: If the deque is empty.
        """
        self._check_not_empty()
        x = self.pop_front()
        self.push_front(x)
        return x

    def back(self) -> T:
        """
        Return the back entry without net change.

        Raises:
            PreconditionViolation: If the deque is empty.
        """
        self._check_not_empty()
        x = self.pop_back()
        self.push_back(x)
        return x

    def replace_front(self, x: T) -> T:
        """
        Replace the front entry with x.

        Returns:
            The old front entry.

        Raises:
            PreconditionViolation: If the deque is empty.
        """
        self._check_not_empty()
        old = self.pop_front()
        self.push_front(x)
        return old

    def replace_back(self, x: T) -> T:
        """
        Replace the back entry with x.

        Returns:
            The old back entry.

        Raises:
            PreconditionViolation: If the deque is empty.
        """
        self._check_not_empty()
        old = self.pop_back()
        self.push_back(x)
        return old

    def __eq__(self, other: object) -> bool:
        """Position-wise equality against a deque of any representation."""
        if other is self:
            return True
        if not isinstance(other, Deque):
            return NotImplemented
        if self.length() != other.length():
            return False
        return all(a == b for a, b in zip(self, other))

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "<" + ",".join(str(x) for x in self) + ">"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
