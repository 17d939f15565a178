"""Stable constants shared across the constraint engine and its reporting layer."""

from __future__ import annotations

from typing import Final

# Logger hierarchy root.
LOGGER_NAME: Final[str] = "array_asserts"

# Configuration sources.
CONFIG_FILE_NAME: Final[str] = "array_asserts.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "array_asserts"
CONFIG_SECTION: Final[str] = "reporting"
ENV_PREFIX: Final[str] = "ARRAY_ASSERTS_"

# Reporting defaults.
DEFAULT_SHORTENED_STRING_LENGTH: Final[int] = 40
DEFAULT_EXPORT_STRING_LENGTH: Final[int] = 200
DEFAULT_EXPORT_MAX_ITEMS: Final[int] = 10
DEFAULT_EXPORT_MAX_DEPTH: Final[int] = 4
DEFAULT_TABLE_COLUMN_GAP: Final[int] = 2

# Diagnostic table layout for associative arrays.
ASSOCIATIVE_TABLE_HEADERS: Final[tuple[str, str, str]] = ("Key", "Value", "Constraint")

# Types that are iterable but never treated as containers.
SCALAR_SEQUENCE_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)

__all__ = [
    "ASSOCIATIVE_TABLE_HEADERS",
    "CONFIG_FILE_NAME",
    "CONFIG_SECTION",
    "DEFAULT_EXPORT_MAX_DEPTH",
    "DEFAULT_EXPORT_MAX_ITEMS",
    "DEFAULT_EXPORT_STRING_LENGTH",
    "DEFAULT_SHORTENED_STRING_LENGTH",
    "DEFAULT_TABLE_COLUMN_GAP",
    "ENV_PREFIX",
    "LOGGER_NAME",
    "PYPROJECT_FILE_NAME",
    "PYPROJECT_TOOL_KEY",
    "SCALAR_SEQUENCE_TYPES",
]
