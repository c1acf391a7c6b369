"""
Shared pytest fixtures for deque and sorting machine tests.
"""

import pytest

from adtkit.factory import (
    REFERENCE_DEQUE_KIND,
    REFERENCE_SORTING_MACHINE_KIND,
    DequeKind,
    SortingMachineKind,
    create_deque,
    create_sorting_machine,
)
from adtkit.models.order import natural_order


@pytest.fixture(params=list(DequeKind), ids=lambda kind: kind.value)
def deque_kind(request):
    """Run the test once per deque representation."""
    return request.param


@pytest.fixture(params=list(SortingMachineKind), ids=lambda kind: kind.value)
def machine_kind(request):
    """Run the test once per sorting machine representation."""
    return request.param


def _deque_from_args(kind, entries):
    deque = create_deque(kind)
    for x in entries:
        deque.push_back(x)
    return deque


def _machine_from_args(kind, order, insertion_mode, entries):
    machine = create_sorting_machine(order, kind)
    for x in entries:
        machine.add(x)
    if not insertion_mode:
        machine.change_to_extraction_mode()
    return machine


@pytest.fixture
def make_deque(deque_kind):
    """Build a deque of the representation under test holding entries, front first."""

    def make(*entries):
        return _deque_from_args(deque_kind, entries)

    return make


@pytest.fixture
def make_reference_deque():
    """Build a deque of the reference representation holding entries, front first."""

    def make(*entries):
        return _deque_from_args(REFERENCE_DEQUE_KIND, entries)

    return make


@pytest.fixture
def make_machine(machine_kind):
    """Build a sorting machine of the representation under test."""

    def make(*entries, insertion_mode=True, order=natural_order):
        return _machine_from_args(machine_kind, order, insertion_mode, entries)

    return make


@pytest.fixture
def make_reference_machine():
    """Build a sorting machine of the reference representation."""

    def make(*entries, insertion_mode=True, order=natural_order):
        return _machine_from_args(
            REFERENCE_SORTING_MACHINE_KIND, order, insertion_mode, entries
        )

    return make
