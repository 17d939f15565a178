"""
array-asserts config package public API.

Purpose
- Export reporting config loading/validation entrypoints and public error types.

Functional requirements
- Support loading from ``array_asserts.toml`` or ``pyproject.toml`` plus
  ``ARRAY_ASSERTS_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from array_asserts.config.loader import (
    ConfigLoadError,
    dump_effective_config,
    load_config,
)
from array_asserts.config.schema import (
    FIELD_NAMES,
    ConfigValidationError,
    ConfigValidationIssue,
    ConfigValidationResult,
    ReportingConfig,
    assert_valid_config,
    default_config,
    merge_config,
    validate_config,
)

__all__ = [
    "FIELD_NAMES",
    "ConfigLoadError",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "ReportingConfig",
    "assert_valid_config",
    "default_config",
    "dump_effective_config",
    "load_config",
    "merge_config",
    "validate_config",
]
