"""Unit tests for ArrayHasKeyWith."""

from __future__ import annotations

from typing import Any

import pytest

from array_asserts.constraints import (
    ArrayHasKeyWith,
    ConstraintUsageError,
    ExpectationFailedError,
    IsEqual,
)
from tests.support import KeyAccessibleRecord, StubConstraint, case_ids, make_dataset_cache

_DATA = make_dataset_cache()


@pytest.mark.parametrize("case_id", case_ids(_DATA, "ArrayHasKeyWith", "describe"))
def test_describe(case_id: str) -> None:
    case = _DATA.load("ArrayHasKeyWith", "describe")[case_id]

    assert ArrayHasKeyWith(case["key"], case["constraint"]).describe() == case["expected"]


@pytest.mark.parametrize("case_id", case_ids(_DATA, "ArrayHasKeyWith", "evaluate"))
def test_evaluate(case_id: str) -> None:
    case: dict[str, Any] = _DATA.load("ArrayHasKeyWith", "evaluate")[case_id]
    constraint = ArrayHasKeyWith(case["key"], case["constraint"])

    assert constraint.evaluate(case["other"], return_result=True) is case["expected"]
    assert constraint.matches(case["other"]) is case["expected"]


def test_missing_key_fails_with_own_message() -> None:
    constraint = ArrayHasKeyWith("foo", IsEqual(1))

    with pytest.raises(ExpectationFailedError) as excinfo:
        constraint.evaluate({"bar": 1}, "payload")

    assert excinfo.value.message == (
        "payload\nFailed asserting that an array has the key 'foo' whose value is equal to 1."
    )
    assert excinfo.value.constraint is constraint


def test_mismatching_value_fails_with_inner_message() -> None:
    inner = IsEqual(1)

    with pytest.raises(ExpectationFailedError) as excinfo:
        ArrayHasKeyWith("foo", inner).evaluate({"foo": 2}, "payload")

    assert excinfo.value.message == "payload\nFailed asserting that 2 is equal to 1."
    assert excinfo.value.constraint is inner


def test_unsupported_value_fails_with_own_message() -> None:
    with pytest.raises(ExpectationFailedError, match="an array has the key 0"):
        ArrayHasKeyWith(0, "a").evaluate("abc")


def test_inner_constraint_is_skipped_when_key_is_absent() -> None:
    inner = StubConstraint("is foo", result=True)

    assert not ArrayHasKeyWith("foo", inner).matches(KeyAccessibleRecord({"bar": 1}))
    assert inner.seen == []


def test_inner_constraint_receives_value() -> None:
    inner = StubConstraint("is foo", result=True)

    assert ArrayHasKeyWith("foo", inner).evaluate({"foo": [1, 2]}) is True
    assert inner.seen == [[1, 2]]


def test_cost_and_properties() -> None:
    inner = StubConstraint(weight=4)
    constraint = ArrayHasKeyWith("foo", inner)

    assert constraint.cost() == 5
    assert constraint.key == "foo"
    assert constraint.constraint is inner
    assert isinstance(ArrayHasKeyWith("foo", 1).constraint, IsEqual)


@pytest.mark.parametrize("key", [1.5, None, False, b"foo"])
def test_rejects_invalid_keys(key: object) -> None:
    with pytest.raises(ConstraintUsageError, match="ArrayHasKeyWith keys must be str or int"):
        ArrayHasKeyWith(key, 1)  # type: ignore[arg-type]
