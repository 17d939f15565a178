"""
array-asserts — collection inspector.

File: src/array_asserts/constraints/inspector.py

Purpose
- Normalize candidate values into a uniform view shared by all array
  constraints: whether the value is a supported container, its ordered
  ``(key, value)`` pairs, and its item count.

Container kinds
- ``NATIVE_KEYED``: a finite, fully enumerable ``Mapping`` or a non-string
  ``Sequence`` (keyed by position).
- ``KEY_ACCESSIBLE``: any object providing ``__contains__`` and
  ``__getitem__``. Keys are probed, never enumerated.
- ``ONE_SHOT_ITERABLE``: any other iterable. Drained in a single forward
  pass; iterators and generators are consumed by inspection.

Cursor restoration
- Restartable iterables are unwrapped with ``iter()`` first.
- Sources implementing ``ResettableCursor`` are rewound before inspection
  and, best effort, moved back to their original position afterwards.
  Restoration is skipped when the cursor cannot report its position, and a
  failure while restoring is logged, never raised. A cursor that fails to
  report its position or to rewind is treated as unsupported.
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from itertools import islice
from typing import Any, Protocol, runtime_checkable

from array_asserts.constants import SCALAR_SEQUENCE_TYPES
from array_asserts.observability.logging import get_logger

_logger = get_logger(__name__)


class ContainerKind(StrEnum):
    """Capability tag assigned to a candidate value before any traversal."""

    NATIVE_KEYED = "native_keyed"
    KEY_ACCESSIBLE = "key_accessible"
    ONE_SHOT_ITERABLE = "one_shot_iterable"
    UNSUPPORTED = "unsupported"


@runtime_checkable
class KeyAccessible(Protocol):
    """Object supporting key probes and key lookups, but not key enumeration."""

    def __contains__(self, key: object) -> bool: ...

    def __getitem__(self, key: Any) -> Any: ...


@runtime_checkable
class ResettableCursor(Protocol):
    """Iterator that can be rewound to its first item and report its position.

    ``tell()`` returns the zero-based index of the next item to be produced,
    or ``None`` when the position cannot be determined reliably.
    """

    def __iter__(self) -> Iterator[Any]: ...

    def __next__(self) -> Any: ...

    def rewind(self) -> None: ...

    def tell(self) -> int | None: ...


@dataclass(frozen=True, slots=True)
class Inspection:
    """Normalized view of a candidate value."""

    supported: bool
    pairs: tuple[tuple[Any, Any], ...]
    item_count: int

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(value for _, value in self.pairs)


_UNSUPPORTED = Inspection(supported=False, pairs=(), item_count=-1)


def is_native(value: object) -> bool:
    """Return whether ``value`` is a finite, fully enumerable keyed container."""

    if isinstance(value, SCALAR_SEQUENCE_TYPES):
        return False
    return isinstance(value, (Mapping, Sequence))


def classify_keyed(value: object) -> ContainerKind:
    """Classify ``value`` for key-based access."""

    if is_native(value):
        return ContainerKind.NATIVE_KEYED
    # Classes expose ``__getitem__``/``__contains__`` as plain attributes.
    if isinstance(value, (type, *SCALAR_SEQUENCE_TYPES)):
        return ContainerKind.UNSUPPORTED
    if isinstance(value, KeyAccessible):
        return ContainerKind.KEY_ACCESSIBLE
    return ContainerKind.UNSUPPORTED


def classify_iterable(value: object) -> ContainerKind:
    """Classify ``value`` for ordered traversal."""

    if is_native(value):
        return ContainerKind.NATIVE_KEYED
    if isinstance(value, SCALAR_SEQUENCE_TYPES):
        return ContainerKind.UNSUPPORTED
    if isinstance(value, Iterable):
        return ContainerKind.ONE_SHOT_ITERABLE
    return ContainerKind.UNSUPPORTED


def has_key(value: Any, kind: ContainerKind, key: object) -> bool:
    """Return whether ``key`` exists in ``value`` using the check suited to ``kind``."""

    if kind is ContainerKind.NATIVE_KEYED:
        if isinstance(value, Mapping):
            return key in value
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return 0 <= key < len(value)
    if kind is ContainerKind.KEY_ACCESSIBLE:
        return bool(key in value)
    return False


def get_item(value: Any, key: Any) -> Any:
    """Return the value stored under ``key``; callers check ``has_key`` first."""

    return value[key]


def native_keys(value: Any) -> tuple[Any, ...]:
    """Enumerate all keys of a native container in iteration order."""

    if isinstance(value, Mapping):
        return tuple(value.keys())
    return tuple(range(len(value)))


def inspect(value: object) -> Inspection:
    """Return ordered ``(key, value)`` pairs and item count for ``value``.

    One-shot sources are fully drained. Unsupported values yield
    ``Inspection(supported=False, pairs=(), item_count=-1)``.
    """

    kind = classify_iterable(value)
    if kind is ContainerKind.NATIVE_KEYED:
        if isinstance(value, Mapping):
            pairs = tuple(value.items())
        else:
            pairs = tuple(enumerate(value))  # type: ignore[arg-type]
        return Inspection(supported=True, pairs=pairs, item_count=len(pairs))
    if kind is ContainerKind.ONE_SHOT_ITERABLE:
        drained = _drain(value)  # type: ignore[arg-type]
        if drained is None:
            return _UNSUPPORTED
        return Inspection(supported=True, pairs=drained, item_count=len(drained))
    return _UNSUPPORTED


def inspect_values(value: object) -> Inspection:
    """Positional view: same as :func:`inspect` with keys replaced by positions."""

    inspection = inspect(value)
    if not inspection.supported:
        return inspection
    pairs = tuple(enumerate(inspection.values))
    return Inspection(supported=True, pairs=pairs, item_count=len(pairs))


def _drain(source: Iterable[Any]) -> tuple[tuple[Any, Any], ...] | None:
    if isinstance(source, ItemsView):
        return tuple(source)
    if not isinstance(source, Iterator):
        source = iter(source)
    if isinstance(source, ResettableCursor):
        return _drain_cursor(source)
    return tuple(enumerate(source))


def _drain_cursor(cursor: ResettableCursor) -> tuple[tuple[Any, Any], ...] | None:
    try:
        position = cursor.tell()
        cursor.rewind()
    except Exception as exc:  # noqa: BLE001
        _logger.debug(
            "cursor_rewind_failed",
            extra={"cursor_type": type(cursor).__name__, "error": repr(exc)},
        )
        return None
    pairs = tuple(enumerate(cursor))
    _restore_cursor(cursor, position)
    return pairs


def _restore_cursor(cursor: ResettableCursor, position: int | None) -> None:
    if position is None:
        _logger.debug("cursor_restore_skipped", extra={"cursor_type": type(cursor).__name__})
        return

    try:
        cursor.rewind()
        consumed = sum(1 for _ in islice(cursor, position))
    except Exception as exc:  # noqa: BLE001 - restoration is best effort
        _logger.debug(
            "cursor_restore_failed",
            extra={"cursor_type": type(cursor).__name__, "error": repr(exc)},
        )
        return

    if consumed != position:
        _logger.debug(
            "cursor_restore_incomplete",
            extra={
                "cursor_type": type(cursor).__name__,
                "position": position,
                "consumed": consumed,
            },
        )


__all__ = [
    "ContainerKind",
    "Inspection",
    "KeyAccessible",
    "ResettableCursor",
    "classify_iterable",
    "classify_keyed",
    "get_item",
    "has_key",
    "inspect",
    "inspect_values",
    "is_native",
    "native_keys",
]
