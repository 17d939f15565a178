"""Constraint asserting that an array has a given key whose value passes another constraint."""

from __future__ import annotations

from array_asserts.constraints.base import Constraint, as_constraint, ensure_key
from array_asserts.constraints.inspector import ContainerKind, classify_keyed, get_item, has_key


class ArrayHasKeyWith(Constraint):
    """Accepts native containers and key-accessible objects; fails when the key is absent."""

    __slots__ = ("_constraint", "_key")

    def __init__(self, key: str | int, constraint: object) -> None:
        self._key = ensure_key(key, owner="ArrayHasKeyWith")
        self._constraint = as_constraint(constraint)

    @property
    def key(self) -> str | int:
        return self._key

    @property
    def constraint(self) -> Constraint:
        return self._constraint

    def describe(self) -> str:
        return (
            f"has the key {self.exporter().export(self._key)} "
            f"whose value {self._constraint.describe()}"
        )

    def matches(self, other: object) -> bool:
        if not self._key_exists(other):
            return False
        return self._constraint.matches(get_item(other, self._key))

    def evaluate(
        self,
        other: object,
        description: str = "",
        *,
        return_result: bool = False,
    ) -> bool:
        """Fail on a missing key, otherwise hand the value to the inner constraint.

        The inner constraint's own failure message is raised for a present key
        whose value does not match.
        """

        if not self._key_exists(other):
            if return_result:
                return False
            self.fail(other, description)

        return self._constraint.evaluate(
            get_item(other, self._key),
            description,
            return_result=return_result,
        )

    def cost(self) -> int:
        return self._constraint.cost() + 1

    def failure_description(self, other: object) -> str:
        return f"an array {self.describe()}"

    def _key_exists(self, other: object) -> bool:
        kind = classify_keyed(other)
        if kind is ContainerKind.UNSUPPORTED:
            return False
        return has_key(other, kind, self._key)


__all__ = ["ArrayHasKeyWith"]
