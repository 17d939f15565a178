"""Composable array constraints and the collection inspector they share."""

from array_asserts.constraints.array_has_item_with import ArrayHasItemWith
from array_asserts.constraints.array_has_key_with import ArrayHasKeyWith
from array_asserts.constraints.associative_array import AssociativeArray
from array_asserts.constraints.base import (
    Constraint,
    ConstraintUsageError,
    ExpectationFailedError,
    IsEqual,
    IsIdentical,
    IsInstanceOf,
    Satisfies,
    as_constraint,
)
from array_asserts.constraints.inspector import (
    ContainerKind,
    Inspection,
    KeyAccessible,
    ResettableCursor,
)
from array_asserts.constraints.sequential_array import SequenceInspection, SequentialArray

__all__ = [
    "ArrayHasItemWith",
    "ArrayHasKeyWith",
    "AssociativeArray",
    "Constraint",
    "ConstraintUsageError",
    "ContainerKind",
    "ExpectationFailedError",
    "Inspection",
    "IsEqual",
    "IsIdentical",
    "IsInstanceOf",
    "KeyAccessible",
    "ResettableCursor",
    "Satisfies",
    "SequenceInspection",
    "SequentialArray",
    "as_constraint",
]
