"""
array-asserts — assertion helpers.

File: src/array_asserts/asserts.py

Purpose
- One assertion function and one constraint factory per array constraint:

  - ``assert_associative_array()`` / ``associative_array()``
  - ``assert_array_has_key_with()`` / ``array_has_key_with()``
  - ``assert_sequential_array()`` / ``sequential_array()``
  - ``assert_array_has_item_with()`` / ``array_has_item_with()``

- The ``assert_*`` form evaluates immediately and raises
  ``ExpectationFailedError``; the bare form only builds the constraint so it
  can be nested in other constraints.

Functional requirements
- ``assert_*`` functions reject candidates of the wrong kind with
  ``ConstraintUsageError`` before any constraint is built.
"""

from __future__ import annotations

from collections.abc import Mapping

from array_asserts.constraints.array_has_item_with import ArrayHasItemWith
from array_asserts.constraints.array_has_key_with import ArrayHasKeyWith
from array_asserts.constraints.associative_array import AssociativeArray
from array_asserts.constraints.base import Constraint, ConstraintUsageError, ExpectationFailedError
from array_asserts.constraints.inspector import (
    ContainerKind,
    classify_iterable,
    classify_keyed,
)
from array_asserts.constraints.sequential_array import SequentialArray
from array_asserts.observability.logging import get_logger

_logger = get_logger(__name__)


def assert_that(value: object, constraint: Constraint, message: str = "") -> None:
    """Evaluate ``value`` against ``constraint``, raising ``ExpectationFailedError`` on mismatch."""

    if not isinstance(constraint, Constraint):
        raise ConstraintUsageError(
            f"assert_that expects a Constraint, got {type(constraint).__name__}"
        )
    try:
        constraint.evaluate(value, message)
    except ExpectationFailedError:
        _logger.debug(
            "assertion_failed",
            extra={"constraint": type(constraint).__name__, "cost": constraint.cost()},
        )
        raise


def associative_array(
    constraints: Mapping[str | int, object],
    allow_missing: bool = False,
    allow_additional: bool = True,
) -> AssociativeArray:
    """Return a new ``AssociativeArray``; additional keys are tolerated by default."""

    return AssociativeArray(constraints, allow_missing, allow_additional)


def assert_associative_array(
    constraints: Mapping[str | int, object],
    array: object,
    allow_missing: bool = False,
    allow_additional: bool = True,
    message: str = "",
) -> None:
    """Assert ``array`` is an associative array matching ``constraints``.

    ``allow_additional=False`` works for native containers only, since
    key-accessible objects cannot list their keys.
    """

    kind = classify_keyed(array)
    if kind is ContainerKind.UNSUPPORTED:
        raise ConstraintUsageError("array must be a mapping, a sequence or key-accessible")
    if kind is ContainerKind.KEY_ACCESSIBLE and not allow_additional:
        raise ConstraintUsageError(
            "array must be a mapping or a sequence when allow_additional is False"
        )

    assert_that(array, associative_array(constraints, allow_missing, allow_additional), message)


def array_has_key_with(key: str | int, constraint: object) -> ArrayHasKeyWith:
    return ArrayHasKeyWith(key, constraint)


def assert_array_has_key_with(
    key: str | int,
    constraint: object,
    array: object,
    message: str = "",
) -> None:
    """Assert ``array`` has ``key`` and its value passes ``constraint``."""

    if classify_keyed(array) is ContainerKind.UNSUPPORTED:
        raise ConstraintUsageError("array must be a mapping, a sequence or key-accessible")

    assert_that(array, array_has_key_with(key, constraint), message)


def sequential_array(
    min_items: int = 0,
    max_items: int | None = None,
    constraint: object | None = None,
    ignore_keys: bool = False,
) -> SequentialArray:
    return SequentialArray(min_items, max_items, constraint, ignore_keys)


def assert_sequential_array(
    array: object,
    min_items: int = 0,
    max_items: int | None = None,
    constraint: object | None = None,
    ignore_keys: bool = False,
    message: str = "",
) -> None:
    """Assert ``array`` is a sequential array with the given bounds and item constraint.

    Iterators and generators passed as ``array`` are consumed.
    """

    if classify_iterable(array) is ContainerKind.UNSUPPORTED:
        raise ConstraintUsageError("array must be a mapping, a sequence or an iterable")

    assert_that(array, sequential_array(min_items, max_items, constraint, ignore_keys), message)


def array_has_item_with(index: int, constraint: object) -> ArrayHasItemWith:
    return ArrayHasItemWith(index, constraint)


def assert_array_has_item_with(
    index: int,
    constraint: object,
    array: object,
    message: str = "",
) -> None:
    """Assert the ``index``-th item of ``array`` passes ``constraint``."""

    if classify_iterable(array) is ContainerKind.UNSUPPORTED:
        raise ConstraintUsageError("array must be a mapping, a sequence or an iterable")

    assert_that(array, array_has_item_with(index, constraint), message)


__all__ = [
    "array_has_item_with",
    "array_has_key_with",
    "assert_array_has_item_with",
    "assert_array_has_key_with",
    "assert_associative_array",
    "assert_sequential_array",
    "assert_that",
    "associative_array",
    "sequential_array",
]
