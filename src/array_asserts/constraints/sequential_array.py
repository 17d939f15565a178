"""
array-asserts — sequential array constraint.

File: src/array_asserts/constraints/sequential_array.py

Purpose
- Assert that a value is like a sequential array: an ordered list whose keys
  run 0..n-1, with a minimum and/or maximum number of items, and whose items
  all pass an optional item constraint.

Functional requirements
- Native lists and tuples are always sequential; mappings must use the keys
  0..n-1 in order. Empty containers are valid.
- Key checking can be disabled (``ignore_keys``), reducing the constraint to
  item count and item checks ("list array").
- Iterators and generators are fully consumed by a single inspection; see
  ``constraints.inspector`` for cursor restoration.
- Bounds are validated at construction: non-negative, ``min <= max``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from array_asserts.constraints.base import (
    Constraint,
    ConstraintUsageError,
    as_constraint,
    ensure_bool,
    ensure_count,
)
from array_asserts.constraints.inspector import inspect as inspect_container


@dataclass(frozen=True, slots=True)
class SequenceInspection:
    """Facts gathered in one pass over a candidate value.

    ``item_count`` is ``-1`` when the candidate is not traversable at all.
    """

    valid: bool
    item_count: int
    items_valid: bool


class SequentialArray(Constraint):
    """Asserts a value is a sequential array with bounded size and matching items."""

    __slots__ = ("_constraint", "_ignore_keys", "_max_items", "_min_items")

    def __init__(
        self,
        min_items: int = 0,
        max_items: int | None = None,
        constraint: object | None = None,
        ignore_keys: bool = False,
    ) -> None:
        min_items = ensure_count(min_items, name="min_items")
        if max_items is not None:
            max_items = ensure_count(max_items, name="max_items")
            if min_items > max_items:
                raise ConstraintUsageError(
                    f"max_items must not be lesser than min_items, got {max_items} < {min_items}"
                )
        ensure_bool(ignore_keys, name="ignore_keys")

        self._min_items = min_items
        self._max_items = max_items
        self._constraint = as_constraint(constraint) if constraint is not None else None
        self._ignore_keys = ignore_keys

    @property
    def min_items(self) -> int:
        return self._min_items

    @property
    def max_items(self) -> int | None:
        return self._max_items

    @property
    def constraint(self) -> Constraint | None:
        return self._constraint

    @property
    def ignore_keys(self) -> bool:
        return self._ignore_keys

    def describe(self) -> str:
        if self._max_items == 0:
            return "is an empty array"

        kind = "list array" if self._ignore_keys else "sequential array"
        if self._min_items <= 1 and self._max_items is None:
            text = "is a" + (" non-empty" if self._min_items > 0 else "") + f" {kind}"
            if self._constraint is not None:
                text += " whose items match"
        else:
            text = f"is a {kind}"
            if self._min_items and self._max_items:
                if self._min_items == self._max_items:
                    noun = "items" if self._min_items > 1 else "item"
                    text += f" with exactly {self._min_items} {noun}"
                else:
                    text += f" with ≥ {self._min_items} and ≤ {self._max_items} items"
            elif self._min_items:
                text += f" with ≥ {self._min_items} items"
            elif self._max_items:
                text += f" with ≤ {self._max_items} items"

            if self._constraint is not None:
                text += " matching"

        if self._constraint is not None:
            text += f' the constraint "{self._constraint.describe()}"'
        return text

    def matches(self, other: object) -> bool:
        result = self.inspect(other)
        if not result.valid or not result.items_valid:
            return False
        if result.item_count < self._min_items:
            return False
        return self._max_items is None or result.item_count <= self._max_items

    def inspect(self, other: object) -> SequenceInspection:
        """Return key contiguity, item count and item validity of ``other``.

        Item checks stop at the first non-sequential key or failing item; the
        count always covers every item.
        """

        inspection = inspect_container(other)
        if not inspection.supported:
            return SequenceInspection(valid=False, item_count=-1, items_valid=False)

        valid = True
        items_valid = True
        for position, (key, item) in enumerate(inspection.pairs):
            if not self._ignore_keys and not _is_position(key, position):
                valid = False
                break
            if self._constraint is not None and not self._constraint.matches(item):
                items_valid = False
                break

        return SequenceInspection(
            valid=valid,
            item_count=inspection.item_count,
            items_valid=items_valid,
        )

    def cost(self) -> int:
        return self._constraint.cost() + 1 if self._constraint is not None else 1


def _is_position(key: Any, position: int) -> bool:
    return not isinstance(key, bool) and isinstance(key, int) and key == position


__all__ = ["SequenceInspection", "SequentialArray"]
