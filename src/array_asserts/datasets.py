"""
array-asserts — YAML test data sets.

File: src/array_asserts/datasets.py

Purpose
- Load named data sets for parametrized tests from one YAML file per test
  subject, through an explicit cache object owned by the caller.

File format
- ``<data_dir>/<Subject>.yaml``; top-level keys are data set names.
- A top-level ``~anchors`` key only holds YAML anchors and is dropped.
- ``<<<: mapping`` (or a list of mappings) deep-merges the given mappings
  underneath a mapping; keys written next to ``<<<`` win.
- ``~generator: {start, step, stop}`` builds a fresh generator yielding
  ``start, start + step, ...`` up to and including ``stop``.
- ``~object: Name`` builds an object with the factory registered as
  ``Name``; the remaining keys are passed as keyword arguments.

Parsed files are cached per instance; markers are materialized anew on every
``load()``, so generators are never shared between callers.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any, Final

import yaml

_ANCHORS_KEY: Final[str] = "~anchors"
_MERGE_KEY: Final[str] = "<<<"
_GENERATOR_KEY: Final[str] = "~generator"
_OBJECT_KEY: Final[str] = "~object"
_SUFFIX: Final[str] = ".yaml"


class DataSetError(ValueError):
    """Raised when a data set file is missing, unparsable or malformed."""


class DataSetCache:
    """Explicit per-caller cache of parsed data set files."""

    __slots__ = ("_data_dir", "_documents", "_factories")

    def __init__(
        self,
        data_dir: str | Path,
        *,
        factories: Mapping[str, Callable[..., object]] | None = None,
    ) -> None:
        self._data_dir = Path(data_dir)
        self._factories = dict(factories or {})
        self._documents: dict[str, dict[str, Any]] = {}

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def load(self, subject: str, name: str) -> Any:
        """Return the materialized data set ``name`` from ``<subject>.yaml``."""

        document = self._document(subject, name)
        if name not in document:
            raise self._error(subject, name, f'Dataset "{name}" not found')
        try:
            return self._materialize(copy.deepcopy(document[name]))
        except DataSetError as exc:
            raise self._error(subject, name, str(exc)) from exc

    def cases(self, subject: str, name: str) -> list[tuple[str, Any]]:
        """Return ``(case_id, case)`` pairs for a mapping-shaped data set."""

        loaded = self.load(subject, name)
        if isinstance(loaded, Mapping):
            return [(str(case_id), case) for case_id, case in loaded.items()]
        if isinstance(loaded, list):
            return [(f"{name}-{index}", case) for index, case in enumerate(loaded)]
        raise self._error(subject, name, "data set must be a mapping or a list")

    def clear(self) -> None:
        self._documents.clear()

    def _document(self, subject: str, name: str) -> dict[str, Any]:
        cached = self._documents.get(subject)
        if cached is not None:
            return cached

        path = self._path(subject)
        if not path.exists():
            raise self._error(subject, name, "No such file or directory")
        if not path.is_file():
            raise self._error(subject, name, "Not a file")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise self._error(subject, name, f"YAML parse error: {exc}") from exc
        except OSError as exc:
            raise self._error(subject, name, f"unable to read file: {exc}") from exc

        if parsed is None:
            parsed = {}
        if not isinstance(parsed, dict):
            raise self._error(subject, name, "top level must be a mapping of data sets")
        parsed.pop(_ANCHORS_KEY, None)

        self._documents[subject] = parsed
        return parsed

    def _materialize(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self._materialize(item) for item in value]
        if not isinstance(value, dict):
            return value

        if _MERGE_KEY in value:
            value = _apply_merge(value)
        if _GENERATOR_KEY in value:
            return _generator_from_options(value[_GENERATOR_KEY])
        if _OBJECT_KEY in value:
            return self._build_object(value)
        return {key: self._materialize(item) for key, item in value.items()}

    def _build_object(self, value: dict[Any, Any]) -> object:
        arguments = dict(value)
        factory_name = arguments.pop(_OBJECT_KEY)
        factory = self._factories.get(factory_name) if isinstance(factory_name, str) else None
        if factory is None:
            known = ", ".join(sorted(self._factories)) or "none"
            raise DataSetError(f"unknown object factory {factory_name!r}; registered: {known}")
        for key in arguments:
            if not isinstance(key, str):
                raise DataSetError(
                    f"object arguments for {factory_name!r} must use string keys, got {key!r}"
                )
        return factory(**{key: self._materialize(item) for key, item in arguments.items()})

    def _path(self, subject: str) -> Path:
        return self._data_dir / f"{subject}{_SUFFIX}"

    def _error(self, subject: str, name: str, reason: str) -> DataSetError:
        return DataSetError(
            f'Test data file "{self._path(subject)}" for {subject}.{name} is invalid: {reason}'
        )


def _apply_merge(value: dict[Any, Any]) -> dict[Any, Any]:
    own = dict(value)
    sources = own.pop(_MERGE_KEY)
    if isinstance(sources, dict):
        sources = [sources]
    if not isinstance(sources, list):
        raise DataSetError(f"{_MERGE_KEY} expects a mapping or a list of mappings")

    merged: dict[Any, Any] = {}
    for source in sources:
        if not isinstance(source, dict):
            raise DataSetError(f"{_MERGE_KEY} expects a mapping or a list of mappings")
        merged = _merge_recursive(merged, source)
    return _merge_recursive(merged, own)


def _merge_recursive(base: dict[Any, Any], overlay: Mapping[Any, Any]) -> dict[Any, Any]:
    merged = dict(base)
    for key, item in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(item, Mapping):
            merged[key] = _merge_recursive(current, item)
        else:
            merged[key] = item
    return merged


def _generator_from_options(options: object) -> Iterator[int]:
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise DataSetError(f"{_GENERATOR_KEY} expects a mapping of start/step/stop")

    start = options.get("start", 0)
    step = options.get("step", 1)
    stop = options.get("stop", 9)
    for label, number in (("start", start), ("step", step), ("stop", stop)):
        if isinstance(number, bool) or not isinstance(number, int):
            raise DataSetError(f"{_GENERATOR_KEY}.{label} must be an integer")
    if step <= 0:
        raise DataSetError(f"{_GENERATOR_KEY}.step must be positive")

    return _count_up(start, step, stop)


def _count_up(start: int, step: int, stop: int) -> Iterator[int]:
    current = start
    while current <= stop:
        yield current
        current += step


__all__ = ["DataSetCache", "DataSetError"]
