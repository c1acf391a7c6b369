"""
Tests for the list-backed collaborators and the factory.
"""

import pytest

from adtkit.factory import (
    DequeKind,
    SortingMachineKind,
    create_deque,
    create_sorting_machine,
)
from adtkit.models.collaborators import ListQueue, ListSequence, ListStack
from adtkit.models.deques import LinkedDeque, ListDeque, TwoStackDeque
from adtkit.models.exceptions import PreconditionViolation
from adtkit.models.order import by_key, natural_order, reverse_order
from adtkit.models.sortingmachines import InsertionSortMachine, MergeSortMachine


class TestListQueue:
    """Tests for ListQueue."""

    def test_fifo(self):
        """Test entries leave in arrival order."""
        q = ListQueue()
        q.enqueue(1)
        q.enqueue(2)

        assert q.front() == 1
        assert q.dequeue() == 1
        assert q.dequeue() == 2
        assert len(q) == 0

    def test_empty_raises(self):
        """Test dequeue and front on an empty queue."""
        q = ListQueue()

        with pytest.raises(PreconditionViolation):
            q.dequeue()
        with pytest.raises(PreconditionViolation):
            q.front()

    def test_transfer_from(self):
        """Test transfer_from moves the contents and empties the source."""
        source, target = ListQueue(), ListQueue()
        source.enqueue("a")

        target.transfer_from(source)

        assert list(target) == ["a"]
        assert source.length() == 0
        with pytest.raises(PreconditionViolation):
            target.transfer_from(target)


class TestListStack:
    """Tests for ListStack."""

    def test_lifo_and_iteration(self):
        """Test pop order and top-to-bottom iteration."""
        s = ListStack()
        for x in [1, 2, 3]:
            s.push(x)

        assert list(s) == [3, 2, 1]
        assert s.pop() == 3
        assert s.length() == 2

    def test_flip(self):
        """Test flip reverses the stack."""
        s = ListStack()
        for x in [1, 2, 3]:
            s.push(x)
        s.flip()

        assert list(s) == [1, 2, 3]

    def test_pop_empty_raises(self):
        """Test pop on an empty stack."""
        with pytest.raises(PreconditionViolation):
            ListStack().pop()


class TestListSequence:
    """Tests for ListSequence."""

    def test_positional_operations(self):
        """Test add, entry, replace_entry and remove by position."""
        s = ListSequence()
        s.add(0, "b")
        s.add(0, "a")
        s.add(2, "c")

        assert list(s) == ["a", "b", "c"]
        assert s.entry(1) == "b"
        assert s.replace_entry(1, "B") == "b"
        assert s.remove(0) == "a"
        assert list(s) == ["B", "c"]

    def test_out_of_bounds_raises(self):
        """Test positions outside the sequence are rejected."""
        s = ListSequence()
        s.add(0, "a")

        with pytest.raises(PreconditionViolation):
            s.add(2, "x")
        with pytest.raises(PreconditionViolation):
            s.entry(1)
        with pytest.raises(PreconditionViolation):
            s.remove(-1)
        with pytest.raises(PreconditionViolation):
            s.replace_entry(1, "x")


class TestFactory:
    """Tests for the representation factories."""

    def test_create_deque_defaults_to_list(self):
        """Test the default deque representation."""
        assert isinstance(create_deque(), ListDeque)

    def test_create_deque_by_kind(self):
        """Test kinds and their string values select a representation."""
        assert isinstance(create_deque(DequeKind.LINKED), LinkedDeque)
        assert isinstance(create_deque("two_stack"), TwoStackDeque)

    def test_create_deque_unknown_kind(self):
        """Test an unknown kind is a configuration error."""
        with pytest.raises(ValueError):
            create_deque("ring_buffer")

    def test_create_sorting_machine(self):
        """Test default and explicit sorting machine kinds."""
        default = create_sorting_machine()
        assert isinstance(default, MergeSortMachine)
        assert default.order() is natural_order

        m = create_sorting_machine(reverse_order, SortingMachineKind.INSERTION)
        assert isinstance(m, InsertionSortMachine)
        assert m.order() is reverse_order

    def test_create_sorting_machine_unknown_kind(self):
        """Test an unknown kind is a configuration error."""
        with pytest.raises(ValueError):
            create_sorting_machine(natural_order, "bubble")


class TestOrder:
    """Tests for the comparator helpers."""

    def test_natural_and_reverse(self):
        """Test sign conventions of the built-in orders."""
        assert natural_order(1, 2) < 0
        assert natural_order(2, 2) == 0
        assert reverse_order(1, 2) > 0

    def test_by_key_ties(self):
        """Test entries with equal keys tie."""
        order = by_key(len)

        assert order("ab", "cd") == 0
        assert order("a", "cd") < 0
