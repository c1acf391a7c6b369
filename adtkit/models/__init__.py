"""
Data models: representations, collaborators and shared helpers.
"""

from adtkit.models.collaborators import ListQueue, ListSequence, ListStack
from adtkit.models.exceptions import PreconditionViolation
from adtkit.models.order import (
    Comparator,
    by_key,
    check_comparator,
    natural_order,
    reverse_order,
)

__all__ = [
    "ListQueue",
    "ListSequence",
    "ListStack",
    "PreconditionViolation",
    "Comparator",
    "by_key",
    "check_comparator",
    "natural_order",
    "reverse_order",
]
