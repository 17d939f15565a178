"""
array-asserts — reporting config schema.

File: src/array_asserts/config/schema.py

Purpose
- Define the typed reporting settings and their built-in defaults.
- Validate raw mappings (TOML tables, env overrides, explicit overrides) into
  a frozen ``ReportingConfig``.

Functional requirements
- Report every validation issue with a deterministic dotted path.
- Reject unknown fields, non-integers and out-of-range values.

Non-functional requirements
- Settings only affect how failure messages are rendered, never matching.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import asdict, dataclass, fields
from typing import Any, Final

from array_asserts.constants import (
    CONFIG_SECTION,
    DEFAULT_EXPORT_MAX_DEPTH,
    DEFAULT_EXPORT_MAX_ITEMS,
    DEFAULT_EXPORT_STRING_LENGTH,
    DEFAULT_SHORTENED_STRING_LENGTH,
    DEFAULT_TABLE_COLUMN_GAP,
)


@dataclass(frozen=True, slots=True)
class ReportingConfig:
    """Rendering limits used when constraint failures are turned into messages."""

    shortened_string_length: int = DEFAULT_SHORTENED_STRING_LENGTH
    export_string_length: int = DEFAULT_EXPORT_STRING_LENGTH
    export_max_items: int = DEFAULT_EXPORT_MAX_ITEMS
    export_max_depth: int = DEFAULT_EXPORT_MAX_DEPTH
    table_column_gap: int = DEFAULT_TABLE_COLUMN_GAP

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


FIELD_NAMES: Final[tuple[str, ...]] = tuple(item.name for item in fields(ReportingConfig))

# Lower bounds per field; a zero column gap is still a readable table.
_MINIMUMS: Final[dict[str, int]] = {
    "shortened_string_length": 4,
    "export_string_length": 4,
    "export_max_items": 1,
    "export_max_depth": 1,
    "table_column_gap": 0,
}


@dataclass(frozen=True, slots=True)
class ConfigValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ConfigValidationResult:
    """Validation result with the typed config when no issues were found."""

    config: ReportingConfig | None
    issues: tuple[ConfigValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.config is not None and not self.issues


class ConfigValidationError(ValueError):
    """Raised by :func:`assert_valid_config` with every issue found."""

    def __init__(self, issues: Sequence[ConfigValidationIssue]) -> None:
        self.issues = tuple(issues)
        lines = [f"- {issue.path}: {issue.message}" for issue in self.issues]
        super().__init__("invalid config:\n" + ("\n".join(lines) or "unknown validation failure"))


def default_config() -> ReportingConfig:
    """Return the built-in defaults."""

    return ReportingConfig()


def merge_config(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Return ``base`` with the keys of ``overlay`` applied on top."""

    return {**base, **overlay}


def validate_config(payload: Mapping[str, object] | object) -> ConfigValidationResult:
    """Validate a flat ``[reporting]`` mapping and return structured issues.

    Key problems come first in sorted key order, then value problems in
    field declaration order.
    """

    if not isinstance(payload, Mapping):
        found = type(payload).__name__
        issue = ConfigValidationIssue(CONFIG_SECTION, f"expected object, got {found}")
        return ConfigValidationResult(config=None, issues=(issue,))

    issues = list(_key_issues(payload))
    values: dict[str, int] = {}
    for name in FIELD_NAMES:
        if name not in payload:
            continue
        problem = _field_problem(payload[name], _MINIMUMS[name])
        if problem is None:
            values[name] = payload[name]  # type: ignore[assignment]
        else:
            issues.append(ConfigValidationIssue(f"{CONFIG_SECTION}.{name}", problem))

    if issues:
        return ConfigValidationResult(config=None, issues=tuple(issues))
    return ConfigValidationResult(config=ReportingConfig(**values), issues=())


def assert_valid_config(payload: Mapping[str, object] | object) -> ReportingConfig:
    """Validate config and raise ``ConfigValidationError`` on failure."""

    result = validate_config(payload)
    if result.config is None:
        raise ConfigValidationError(result.issues)
    return result.config


def _key_issues(payload: Mapping[object, object]) -> Iterator[ConfigValidationIssue]:
    for key in sorted(payload, key=str):
        if not isinstance(key, str):
            yield ConfigValidationIssue(
                CONFIG_SECTION, f"object key must be string, got {type(key).__name__}"
            )
        elif key not in FIELD_NAMES:
            yield ConfigValidationIssue(f"{CONFIG_SECTION}.{key}", "unknown field")


def _field_problem(value: object, minimum: int) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return f"expected integer, got {type(value).__name__}"
    if value < minimum:
        return f"must be >= {minimum}"
    return None


__all__ = [
    "FIELD_NAMES",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "ReportingConfig",
    "assert_valid_config",
    "default_config",
    "merge_config",
    "validate_config",
]
