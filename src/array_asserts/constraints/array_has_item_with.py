"""Constraint asserting that an array has an item at a given index passing another constraint."""

from __future__ import annotations

from array_asserts.constraints.base import Constraint, as_constraint, ensure_count
from array_asserts.constraints.inspector import inspect_values


class ArrayHasItemWith(Constraint):
    """Checks the ``index``-th item of a collection, ignoring its original keys.

    Native containers are re-indexed by position; iterators and generators
    are consumed completely. Collections with ``index`` or fewer items never
    match.
    """

    __slots__ = ("_constraint", "_index")

    def __init__(self, index: int, constraint: object) -> None:
        self._index = ensure_count(index, name="index")
        self._constraint = as_constraint(constraint)

    @property
    def index(self) -> int:
        return self._index

    @property
    def constraint(self) -> Constraint:
        return self._constraint

    def describe(self) -> str:
        return (
            f"is an array that has a value at index {self._index} "
            f"which {self._constraint.describe()}"
        )

    def matches(self, other: object) -> bool:
        inspection = inspect_values(other)
        if not inspection.supported or inspection.item_count <= self._index:
            return False
        return self._constraint.matches(inspection.values[self._index])

    def cost(self) -> int:
        return self._constraint.cost() + 1


__all__ = ["ArrayHasItemWith"]
