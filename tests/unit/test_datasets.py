"""
array-asserts — unit tests for YAML data sets

File: tests/unit/test_datasets.py

Purpose
- Validate data set loading, merging, generators, object factories and
  error reporting of ``DataSetCache``.
"""

from __future__ import annotations

import types
from typing import TYPE_CHECKING

import pytest

from array_asserts.datasets import DataSetCache, DataSetError
from tests.support import DATA_DIR, KeyAccessibleRecord, StubConstraint, make_dataset_cache

if TYPE_CHECKING:
    from pathlib import Path


def test_merge_lets_own_keys_win_and_merges_nested_mappings() -> None:
    loaded = make_dataset_cache().load("DataSetCache", "merged")

    assert loaded == {"name": "own", "nested": {"a": 1, "b": 3}, "tags": ["x"]}


def test_merge_from_list_applies_sources_in_order() -> None:
    loaded = make_dataset_cache().load("DataSetCache", "merged_from_list")

    assert loaded == {
        "name": "base",
        "nested": {"a": 1, "b": 2, "c": 4},
        "tags": ["x"],
        "extra": True,
    }


def test_anchors_are_not_data_sets() -> None:
    with pytest.raises(DataSetError, match='Dataset "~anchors" not found'):
        make_dataset_cache().load("DataSetCache", "~anchors")


def test_generator_defaults() -> None:
    generator = make_dataset_cache().load("DataSetCache", "generator_defaults")

    assert isinstance(generator, types.GeneratorType)
    assert list(generator) == list(range(10))


def test_generator_options() -> None:
    generator = make_dataset_cache().load("DataSetCache", "generator_stepped")

    assert list(generator) == [2, 5, 8, 11]


def test_every_load_builds_fresh_generators() -> None:
    cache = make_dataset_cache()
    first = cache.load("DataSetCache", "generator_stepped")
    list(first)

    assert list(cache.load("DataSetCache", "generator_stepped")) == [2, 5, 8, 11]


def test_objects_are_built_with_factories() -> None:
    loaded = make_dataset_cache().load("DataSetCache", "objects")

    assert isinstance(loaded["constraint"], StubConstraint)
    assert loaded["constraint"].describe() == "is foo"
    assert isinstance(loaded["record"], KeyAccessibleRecord)
    assert loaded["record"]["a"] == 1


def test_cases_from_mapping_and_list() -> None:
    cache = make_dataset_cache()

    assert [case_id for case_id, _ in cache.cases("SequentialArray", "describe")][:2] == [
        "any_size",
        "non_empty",
    ]
    assert cache.cases("DataSetCache", "listed") == [
        ("listed-0", {"value": 1}),
        ("listed-1", {"value": 2}),
    ]


def test_cases_require_a_collection() -> None:
    with pytest.raises(DataSetError, match="data set must be a mapping or a list"):
        make_dataset_cache().cases("DataSetCache", "scalar")


def test_missing_data_set() -> None:
    with pytest.raises(DataSetError) as excinfo:
        make_dataset_cache().load("DataSetCache", "absent")

    assert str(excinfo.value) == (
        f'Test data file "{DATA_DIR / "DataSetCache.yaml"}" for DataSetCache.absent is invalid: '
        'Dataset "absent" not found'
    )


def test_missing_file() -> None:
    with pytest.raises(DataSetError, match="No such file or directory"):
        make_dataset_cache().load("Absent", "x")


@pytest.mark.parametrize(
    ("subject", "name", "reason"),
    [
        ("Broken", "key", "YAML parse error"),
        ("NotAMapping", "x", "top level must be a mapping of data sets"),
        ("DataSetCache", "unknown_factory", "unknown object factory 'Nope'"),
        ("DataSetCache", "bad_generator", "~generator.step must be positive"),
    ],
)
def test_invalid_files_and_data_sets(subject: str, name: str, reason: str) -> None:
    with pytest.raises(DataSetError, match=reason):
        make_dataset_cache().load(subject, name)


def test_directory_instead_of_file(tmp_path: Path) -> None:
    (tmp_path / "Subject.yaml").mkdir()

    with pytest.raises(DataSetError, match="Not a file"):
        DataSetCache(tmp_path).load("Subject", "x")


def test_parsed_files_are_cached_until_cleared(tmp_path: Path) -> None:
    path = tmp_path / "Subject.yaml"
    path.write_text("first: 1\n", encoding="utf-8")
    cache = DataSetCache(tmp_path)

    assert cache.load("Subject", "first") == 1
    path.write_text("first: 2\n", encoding="utf-8")
    assert cache.load("Subject", "first") == 1

    cache.clear()
    assert cache.load("Subject", "first") == 2
    assert cache.data_dir == tmp_path
