"""Human-readable value export used only to build failure messages."""

from __future__ import annotations

import reprlib
from collections.abc import Mapping, Sequence
from functools import lru_cache

from array_asserts.config.loader import load_config
from array_asserts.config.schema import ReportingConfig
from array_asserts.constants import SCALAR_SEQUENCE_TYPES

_ELLIPSIS = "..."

_SHORT_CONTAINER_FORMS: dict[type, str] = {
    dict: "{...}",
    list: "[...]",
    tuple: "(...)",
}


class Exporter:
    """Renders arbitrary values within the limits of a ``ReportingConfig``."""

    __slots__ = ("_config", "_repr")

    def __init__(self, config: ReportingConfig | None = None) -> None:
        self._config = config if config is not None else ReportingConfig()
        self._repr = _build_repr(self._config)

    @property
    def config(self) -> ReportingConfig:
        return self._config

    def export(self, value: object) -> str:
        """Full export, bounded in depth, item count and string length."""

        return self._repr.repr(value)

    def shortened_export(self, value: object) -> str:
        """Single-line export for table cells.

        Non-empty containers collapse to ``[...]``-style placeholders; any other
        value is its ``repr`` cut to ``shortened_string_length`` characters.
        """

        if _is_native_container(value):
            if len(value) == 0:  # type: ignore[arg-type]
                return repr(value)
            placeholder = _SHORT_CONTAINER_FORMS.get(type(value))
            if placeholder is not None:
                return placeholder
            return f"{type(value).__name__}(...)"

        return _truncate(repr(value), self._config.shortened_string_length)


@lru_cache(maxsize=1)
def default_exporter() -> Exporter:
    """Process-wide exporter built from the discovered reporting config."""

    return Exporter(load_config())


def export(value: object) -> str:
    return default_exporter().export(value)


def shortened_export(value: object) -> str:
    return default_exporter().shortened_export(value)


def _build_repr(config: ReportingConfig) -> reprlib.Repr:
    renderer = reprlib.Repr()
    renderer.maxlevel = config.export_max_depth
    renderer.maxtuple = config.export_max_items
    renderer.maxlist = config.export_max_items
    renderer.maxarray = config.export_max_items
    renderer.maxdict = config.export_max_items
    renderer.maxset = config.export_max_items
    renderer.maxfrozenset = config.export_max_items
    renderer.maxdeque = config.export_max_items
    renderer.maxstring = config.export_string_length
    renderer.maxlong = config.export_string_length
    renderer.maxother = config.export_string_length
    return renderer


def _is_native_container(value: object) -> bool:
    if isinstance(value, SCALAR_SEQUENCE_TYPES):
        return False
    return isinstance(value, (Mapping, Sequence))


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(limit - len(_ELLIPSIS), 1)] + _ELLIPSIS


__all__ = [
    "Exporter",
    "default_exporter",
    "export",
    "shortened_export",
]
