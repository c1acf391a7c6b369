"""
Deque representations.
"""

from adtkit.models.deques.linked_deque import LinkedDeque
from adtkit.models.deques.list_deque import ListDeque
from adtkit.models.deques.sequence_deque import SequenceDeque
from adtkit.models.deques.two_stack_deque import TwoStackDeque

__all__ = ["LinkedDeque", "ListDeque", "SequenceDeque", "TwoStackDeque"]
