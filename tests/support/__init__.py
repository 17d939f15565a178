"""Shared builders for array-asserts tests: doubles and YAML data set access."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from array_asserts.constraints import (
    AssociativeArray,
    IsEqual,
    IsIdentical,
    IsInstanceOf,
    SequentialArray,
)
from array_asserts.datasets import DataSetCache

from .doubles import (
    BrokenRewindCursor,
    IterableAggregate,
    KeyAccessibleRecord,
    RewindableCursor,
    StubConstraint,
    UnrewindableCursor,
    count_up,
)

DATA_DIR: Final[Path] = Path(__file__).resolve().parents[1] / "data"

FACTORIES: Final[dict[str, object]] = {
    "AssociativeArray": AssociativeArray,
    "IsEqual": IsEqual,
    "IsIdentical": IsIdentical,
    "IsInstanceOfInt": lambda: IsInstanceOf(int),
    "IterableAggregate": IterableAggregate,
    "KeyAccessibleRecord": KeyAccessibleRecord,
    "RewindableCursor": RewindableCursor,
    "SequentialArray": SequentialArray,
    "StubConstraint": StubConstraint,
}


def make_dataset_cache() -> DataSetCache:
    return DataSetCache(DATA_DIR, factories=FACTORIES)  # type: ignore[arg-type]


def case_ids(cache: DataSetCache, subject: str, name: str) -> list[str]:
    """Ids of a mapping-shaped data set, for ``pytest.mark.parametrize``."""

    return [case_id for case_id, _ in cache.cases(subject, name)]


__all__ = [
    "DATA_DIR",
    "FACTORIES",
    "BrokenRewindCursor",
    "IterableAggregate",
    "KeyAccessibleRecord",
    "RewindableCursor",
    "StubConstraint",
    "UnrewindableCursor",
    "case_ids",
    "count_up",
    "make_dataset_cache",
]
