"""
array-asserts — constraint base protocol and leaf constraints.

File: src/array_asserts/constraints/base.py

Purpose
- Define the abstract ``Constraint`` every matcher implements: evaluation,
  self-description, cost, and the failure-message protocol.
- Provide the leaf constraints used to wrap plain values and simple checks.

Functional requirements
- ``matches`` never raises for data that merely does not match.
- Invalid construction arguments raise ``ConstraintUsageError`` immediately.
- Plain values are wrapped in ``IsEqual`` at construction time only.

Non-functional requirements
- Constraint objects are immutable after construction and hold no
  evaluation state, so one tree may be evaluated any number of times.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import NoReturn

from array_asserts.reporting.exporter import Exporter, default_exporter


class ConstraintUsageError(ValueError):
    """Raised when a constraint is constructed or invoked with invalid arguments."""


class ExpectationFailedError(AssertionError):
    """Raised when a value fails a constraint during an assertion."""

    def __init__(
        self,
        message: str,
        *,
        constraint: Constraint | None = None,
        other_repr: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.constraint = constraint
        self.other_repr = other_repr


class Constraint(ABC):
    """A composable predicate that can test a value and describe itself."""

    __slots__ = ()

    def evaluate(
        self,
        other: object,
        description: str = "",
        *,
        return_result: bool = False,
    ) -> bool:
        """Evaluate ``other`` against this constraint.

        With ``return_result`` the match result is returned. Otherwise a
        mismatch raises ``ExpectationFailedError`` and a match returns ``True``.
        """

        success = self.matches(other)
        if return_result:
            return success
        if not success:
            self.fail(other, description)
        return True

    @abstractmethod
    def matches(self, other: object) -> bool:
        """Return whether ``other`` satisfies this constraint."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of this constraint."""

    def cost(self) -> int:
        """Number of checks this constraint stands for, including wrapped constraints."""

        return 1

    def exporter(self) -> Exporter:
        return default_exporter()

    def failure_description(self, other: object) -> str:
        return f"{self.exporter().export(other)} {self.describe()}"

    def additional_failure_description(self, other: object) -> str:
        return ""

    def fail(self, other: object, description: str = "") -> NoReturn:
        """Raise ``ExpectationFailedError`` with the full failure message for ``other``."""

        lines: list[str] = []
        if description:
            lines.append(description)
        lines.append(f"Failed asserting that {self.failure_description(other)}.")
        additional = self.additional_failure_description(other)
        if additional:
            lines.append(additional)
        raise ExpectationFailedError(
            "\n".join(lines),
            constraint=self,
            other_repr=self.exporter().export(other),
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.describe()}>"


class IsEqual(Constraint):
    """Requires ``other == value`` (deep for dicts, lists and tuples)."""

    __slots__ = ("_value",)

    def __init__(self, value: object) -> None:
        self._value = value

    @property
    def value(self) -> object:
        return self._value

    def matches(self, other: object) -> bool:
        return bool(self._value == other)

    def describe(self) -> str:
        return f"is equal to {self.exporter().export(self._value)}"


class IsIdentical(Constraint):
    """Requires ``other is value``."""

    __slots__ = ("_value",)

    def __init__(self, value: object) -> None:
        self._value = value

    @property
    def value(self) -> object:
        return self._value

    def matches(self, other: object) -> bool:
        return other is self._value

    def describe(self) -> str:
        return f"is identical to {self.exporter().export(self._value)}"


class IsInstanceOf(Constraint):
    """Requires ``isinstance(other, types)``."""

    __slots__ = ("_types",)

    def __init__(self, *types: type) -> None:
        if not types:
            raise ConstraintUsageError("IsInstanceOf requires at least one type")
        for candidate in types:
            if not isinstance(candidate, type):
                raise ConstraintUsageError(
                    f"IsInstanceOf expects types, got {type(candidate).__name__}"
                )
        self._types = tuple(types)

    @property
    def types(self) -> tuple[type, ...]:
        return self._types

    def matches(self, other: object) -> bool:
        return isinstance(other, self._types)

    def describe(self) -> str:
        names = " or ".join(candidate.__name__ for candidate in self._types)
        return f"is an instance of {names}"


class Satisfies(Constraint):
    """Requires a truthy result from ``callback(other)``."""

    __slots__ = ("_callback", "_description")

    def __init__(
        self,
        callback: Callable[[object], object],
        description: str = "satisfies a callback",
    ) -> None:
        if not callable(callback):
            raise ConstraintUsageError(
                f"Satisfies expects a callable, got {type(callback).__name__}"
            )
        if not isinstance(description, str) or not description.strip():
            raise ConstraintUsageError("Satisfies description must be a non-empty string")
        self._callback = callback
        self._description = description.strip()

    def matches(self, other: object) -> bool:
        return bool(self._callback(other))

    def describe(self) -> str:
        return self._description


def as_constraint(value: object) -> Constraint:
    """Return ``value`` if it is a constraint, else wrap it in ``IsEqual``."""

    if isinstance(value, Constraint):
        return value
    return IsEqual(value)


def ensure_key(key: object, *, owner: str) -> str | int:
    """Validate an array key: ``str`` or ``int``, never ``bool``."""

    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise ConstraintUsageError(
            f"{owner} keys must be str or int, got {type(key).__name__}"
        )
    return key


def ensure_bool(value: object, *, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConstraintUsageError(f"{name} must be a bool, got {type(value).__name__}")
    return value


def ensure_count(value: object, *, name: str) -> int:
    """Validate a non-negative ``int`` (``bool`` excluded)."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise ConstraintUsageError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ConstraintUsageError(f"{name} must be a non-negative integer, got {value}")
    return value


__all__ = [
    "Constraint",
    "ConstraintUsageError",
    "ExpectationFailedError",
    "IsEqual",
    "IsIdentical",
    "IsInstanceOf",
    "Satisfies",
    "as_constraint",
    "ensure_bool",
    "ensure_count",
    "ensure_key",
]
