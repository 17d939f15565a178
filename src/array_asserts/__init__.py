"""
array-asserts — composable array constraints for tests.

Purpose
- Package root. Exposes the array constraints, the leaf constraints used to
  compose them, and the paired ``assert_*`` / factory helpers.

Functional requirements
- Must not have side effects at import time beyond installing a
  ``NullHandler`` on the package logger (no config loading).
"""

import logging

from array_asserts.asserts import (
    array_has_item_with,
    array_has_key_with,
    assert_array_has_item_with,
    assert_array_has_key_with,
    assert_associative_array,
    assert_sequential_array,
    assert_that,
    associative_array,
    sequential_array,
)
from array_asserts.constants import LOGGER_NAME
from array_asserts.constraints import (
    ArrayHasItemWith,
    ArrayHasKeyWith,
    AssociativeArray,
    Constraint,
    ConstraintUsageError,
    ContainerKind,
    ExpectationFailedError,
    IsEqual,
    IsIdentical,
    IsInstanceOf,
    KeyAccessible,
    ResettableCursor,
    Satisfies,
    SequentialArray,
    as_constraint,
)

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "ArrayHasItemWith",
    "ArrayHasKeyWith",
    "AssociativeArray",
    "Constraint",
    "ConstraintUsageError",
    "ContainerKind",
    "ExpectationFailedError",
    "IsEqual",
    "IsIdentical",
    "IsInstanceOf",
    "KeyAccessible",
    "ResettableCursor",
    "Satisfies",
    "SequentialArray",
    "__version__",
    "array_has_item_with",
    "array_has_key_with",
    "as_constraint",
    "assert_array_has_item_with",
    "assert_array_has_key_with",
    "assert_associative_array",
    "assert_sequential_array",
    "assert_that",
    "associative_array",
    "sequential_array",
]
