"""
Collaborator contracts used as backing storage by some representations.

Only the capabilities the representations need are declared here.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(ABC, Generic[T]):
    """
    First-in first-out collection.

    Implementations:
    - ListQueue
    """

    @abstractmethod
    def enqueue(self, x: T) -> None:
        """Add x at the back. O(1)"""
        pass

    @abstractmethod
    def dequeue(self) -> T:
        """
        Remove and return the front entry.

        Raises:
            PreconditionViolation: If the queue is empty.
        """
        pass

    @abstractmethod
    def front(self) -> T:
        """
        Return the front entry without removing it.

        Raises:
            PreconditionViolation: If the queue is empty.
        """
        pass

    @abstractmethod
    def length(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def new_instance(self) -> "Queue[T]":
        """Return a new empty queue of the same representation."""
        pass

    @abstractmethod
    def transfer_from(self, source: "Queue[T]") -> None:
        """
        Move the contents of source into this queue, leaving source empty.

        Raises:
            PreconditionViolation: If source is self or a different
                representation.
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate front to back."""
        pass

    def __len__(self) -> int:
        return self.length()


class Stack(ABC, Generic[T]):
    """
    Last-in first-out collection.

    Implementations:
    - ListStack
    """

    @abstractmethod
    def push(self, x: T) -> None:
        """Add x on top. O(1)"""
        pass

    @abstractmethod
    def pop(self) -> T:
        """
        Remove and return the top entry.

        Raises:
            PreconditionViolation: If the stack is empty.
        """
        pass

    @abstractmethod
    def length(self) -> int:
        pass

    @abstractmethod
    def flip(self) -> None:
        """Reverse the stack in place. O(N)"""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate top to bottom."""
        pass

    def __len__(self) -> int:
        return self.length()


class IndexedSequence(ABC, Generic[T]):
    """
    Ordered collection addressed by position 0..length-1.

    Implementations:
    - ListSequence
    """

    @abstractmethod
    def add(self, pos: int, x: T) -> None:
        """
        Insert x so that it ends up at position pos.

        Args:
            pos: Target position, 0 <= pos <= length.

        Raises:
            PreconditionViolation: If pos is out of bounds.
        """
        pass

    @abstractmethod
    def remove(self, pos: int) -> T:
        """
        Remove and return the entry at pos.

        Args:
            pos: Position to remove, 0 <= pos < length.

        Raises:
            PreconditionViolation: If pos is out of bounds.
        """
        pass

    @abstractmethod
    def entry(self, pos: int) -> T:
        """
        Return the entry at pos.

        Raises:
            PreconditionViolation: If pos is out of bounds.
        """
        pass

    @abstractmethod
    def replace_entry(self, pos: int, x: T) -> T:
        """
        Replace the entry at pos with x and return the old entry.

        Raises:
            PreconditionViolation: If pos is out of bounds.
        """
        pass

    @abstractmethod
    def length(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate from position 0 upward."""
        pass

    def __len__(self) -> int:
        return self.length()
