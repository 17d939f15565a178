"""Constraint matching a keyed container against a map of per-key constraints."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from array_asserts.constants import ASSOCIATIVE_TABLE_HEADERS
from array_asserts.constraints.base import (
    Constraint,
    ConstraintUsageError,
    as_constraint,
    ensure_bool,
    ensure_key,
)
from array_asserts.constraints.inspector import (
    ContainerKind,
    classify_keyed,
    get_item,
    has_key,
    native_keys,
)
from array_asserts.reporting.table import render_table


class AssociativeArray(Constraint):
    """Asserts that a value is an associative array matching a given structure.

    Native containers and key-accessible objects are both accepted. Declared
    keys are checked in declaration order; each present value must pass its
    constraint. By default missing keys and undeclared additional keys fail
    the constraint. Additional keys can only be detected on native
    containers, since key-accessible objects cannot enumerate their keys.

    Plain values given instead of constraints are wrapped in ``IsEqual``
    unless ``strict`` is set, in which case they are rejected.
    """

    __slots__ = ("_allow_additional", "_allow_missing", "_constraints")

    def __init__(
        self,
        constraints: Mapping[str | int, object],
        allow_missing: bool = False,
        allow_additional: bool = False,
        *,
        strict: bool = False,
    ) -> None:
        if not isinstance(constraints, Mapping):
            raise ConstraintUsageError(
                "AssociativeArray expects a mapping of constraints, "
                f"got {type(constraints).__name__}"
            )
        ensure_bool(allow_missing, name="allow_missing")
        ensure_bool(allow_additional, name="allow_additional")

        normalized: dict[str | int, Constraint] = {}
        for key, constraint in constraints.items():
            checked_key = ensure_key(key, owner="AssociativeArray")
            if strict and not isinstance(constraint, Constraint):
                raise ConstraintUsageError(
                    f"All constraints of AssociativeArray must be Constraint instances, "
                    f"got {type(constraint).__name__} for key {key!r}"
                )
            normalized[checked_key] = as_constraint(constraint)

        self._constraints = normalized
        self._allow_missing = allow_missing
        self._allow_additional = allow_additional

    @property
    def constraints(self) -> Mapping[str | int, Constraint]:
        return MappingProxyType(self._constraints)

    @property
    def allow_missing(self) -> bool:
        return self._allow_missing

    @property
    def allow_additional(self) -> bool:
        return self._allow_additional

    def describe(self) -> str:
        if not self._constraints:
            if self._allow_additional:
                return "is an associative array"
            return "is an empty associative array"

        exporter = self.exporter()
        descriptions = [
            f"has the key {exporter.export(key)} whose value {constraint.describe()}"
            for key, constraint in self._constraints.items()
        ]
        joiner = " or " if self._allow_missing else " and "
        text = "is an associative array that " + joiner.join(descriptions)
        if self._allow_additional:
            text += " or any other item"
        return text

    def matches(self, other: object) -> bool:
        kind = classify_keyed(other)
        if kind is ContainerKind.UNSUPPORTED:
            return False

        candidate: Any = other
        for key, constraint in self._constraints.items():
            if not has_key(candidate, kind, key):
                if self._allow_missing:
                    continue
                return False
            if not constraint.evaluate(get_item(candidate, key), return_result=True):
                return False

        if not self._allow_additional and kind is ContainerKind.NATIVE_KEYED:
            return not self.unexpected_keys(candidate)
        return True

    def unexpected_keys(self, other: object) -> tuple[Any, ...]:
        """Keys of a native container that no constraint declares.

        Key-accessible and unsupported values always yield an empty tuple.
        """

        if classify_keyed(other) is not ContainerKind.NATIVE_KEYED:
            return ()
        return tuple(key for key in native_keys(other) if key not in self._constraints)

    def cost(self) -> int:
        return 1 + sum(constraint.cost() for constraint in self._constraints.values())

    def failure_description(self, other: object) -> str:
        if classify_keyed(other) is ContainerKind.UNSUPPORTED:
            return f"{self.exporter().export(other)} is an associative array"
        return "associative array matches constraints"

    def additional_failure_description(self, other: object) -> str:
        kind = classify_keyed(other)
        if kind is ContainerKind.UNSUPPORTED:
            return ""

        exporter = self.exporter()
        candidate: Any = other
        rows: list[tuple[str, str, str]] = []
        for key, constraint in self._constraints.items():
            value = (
                exporter.shortened_export(get_item(candidate, key))
                if has_key(candidate, kind, key)
                else ""
            )
            rows.append((exporter.export(key), value, f"Value {constraint.describe()}"))

        if not self._allow_additional:
            for key in self.unexpected_keys(candidate):
                value = exporter.shortened_export(get_item(candidate, key))
                rows.append((exporter.export(key), value, ""))

        table = render_table(
            ASSOCIATIVE_TABLE_HEADERS,
            rows,
            gap=exporter.config.table_column_gap,
        )
        legend = (
            f"[{_flag(self._allow_missing)}] Allow missing; "
            f"[{_flag(self._allow_additional)}] Allow additional"
        )
        return f"{table}\n{legend}"


def _flag(enabled: bool) -> str:
    return "x" if enabled else " "


__all__ = ["AssociativeArray"]
