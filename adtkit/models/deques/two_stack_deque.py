"""
Deque built from two stacks.

The front half lives in ``left`` (top = front entry) and the back half in
``right`` (top = back entry), so that the deque is left followed by
reverse(right). Only push, pop, flip and length are used on the stacks.
"""

import logging
from collections.abc import Iterator
from typing import TypeVar

from adtkit.interfaces.collaborators import Stack
from adtkit.interfaces.deque import Deque
from adtkit.models.collaborators import ListStack

T = TypeVar("T")

logger = logging.getLogger(__name__)


def shift(s1: Stack[T], s2: Stack[T]) -> None:
    """
    Move the bottom entry of s1 to the bottom of s2.

    Preserves s1 * reverse(s2). Flipping is the only way to reach a stack's
    bottom with stack primitives alone.

    Args:
        s1: Non-empty source stack.
        s2: Destination stack.

    Time complexity: O(|s1| + |s2|)
    """
    s1.flip()
    s2.flip()

    s2.push(s1.pop())

    s1.flip()
    s2.flip()


class TwoStackDeque(Deque[T]):
    """
    Two-stack implementation of Deque.

    Complexity:
    - push_front / push_back: O(1)
    - pop_front / pop_back: O(1) while the matching stack is non-empty,
      otherwise one shift from the other stack
    """

    def __init__(self) -> None:
        self._left: Stack[T] = ListStack()
        self._right: Stack[T] = ListStack()

    def length(self) -> int:
        return self._left.length() + self._right.length()

    def push_front(self, x: T) -> None:
        self._left.push(x)

    def push_back(self, x: T) -> None:
        self._right.push(x)

    def pop_front(self) -> T:
        self._check_not_empty()
        if self._left.length() == 0:
            logger.debug("Shifting front entry from right stack (%d)", self._right.length())
            shift(self._right, self._left)
        return self._left.pop()

    def pop_back(self) -> T:
        self._check_not_empty()
        if self._right.length() == 0:
            logger.debug("Shifting back entry from left stack (%d)", self._left.length())
            shift(self._left, self._right)
        return self._right.pop()

    def clear(self) -> None:
        self._left = ListStack()
        self._right = ListStack()

    def new_instance(self) -> "TwoStackDeque[T]":
        return TwoStackDeque()

    def transfer_from(self, source: Deque[T]) -> None:
        self._check_transfer_source(source, TwoStackDeque)
        self._left = source._left
        self._right = source._right
        source.clear()

    def __iter__(self) -> Iterator[T]:
        self._drain_right()
        return iter(self._left)

    def _drain_right(self) -> None:
        """
        Move every entry of right onto the bottom of left.

        The abstract value is unchanged; afterwards left alone, read top to
        bottom, is the deque front to back.
        """
        if self._right.length() == 0:
            return

        logger.debug("Draining %d entries from right stack", self._right.length())
        self._left.flip()
        self._right.flip()
        while self._right.length() > 0:
            self._left.push(self._right.pop())
        self._left.flip()
