"""
array-asserts — reporting config loader.

File: src/array_asserts/config/loader.py

Purpose
- Load effective reporting config from defaults, a TOML file, env vars, and
  explicit overrides.

What should be included in this file
- Precedence logic: overrides > env (ARRAY_ASSERTS_) > file > defaults.
- TOML loading via ``tomllib`` from ``array_asserts.toml`` or the
  ``[tool.array_asserts]`` table of ``pyproject.toml``.
- Deterministic environment variable mapping and integer coercion.

Non-functional requirements
- Keep loading deterministic and side-effect free.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from array_asserts.config.schema import (
    FIELD_NAMES,
    ReportingConfig,
    assert_valid_config,
    merge_config,
)
from array_asserts.constants import (
    CONFIG_FILE_NAME,
    CONFIG_SECTION,
    ENV_PREFIX,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_KEY,
)
from array_asserts.observability.logging import get_logger

_logger = get_logger(__name__)


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded or overrides cannot be coerced."""


def load_config(
    config_path: str | Path | None = None,
    *,
    overrides: Mapping[str, object] | None = None,
    environ: Mapping[str, str] | None = None,
    search_dir: str | Path | None = None,
) -> ReportingConfig:
    """Load effective config with deterministic precedence: overrides > env > file > defaults."""

    env_map = dict(os.environ if environ is None else environ)

    if config_path is not None:
        resolved = Path(config_path).expanduser().resolve()
        file_payload = _load_section(resolved, required=True)
    else:
        base_dir = Path.cwd() if search_dir is None else Path(search_dir)
        file_payload = _discover_section(base_dir.expanduser().resolve())

    merged = merge_config({}, file_payload)
    merged = merge_config(merged, _collect_env_overrides(env_map))
    merged = merge_config(merged, dict(overrides or {}))
    return assert_valid_config(merged)


def dump_effective_config(config: ReportingConfig) -> str:
    """Return deterministic JSON dump of the effective config."""

    return json.dumps(config.to_dict(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _discover_section(base_dir: Path) -> dict[str, Any]:
    dedicated = base_dir / CONFIG_FILE_NAME
    if dedicated.exists():
        return _load_section(dedicated, required=True)

    pyproject = base_dir / PYPROJECT_FILE_NAME
    if pyproject.exists():
        return _load_section(pyproject, required=False)

    return {}


def _load_section(path: Path, *, required: bool) -> dict[str, Any]:
    parsed = _read_toml(path, required=required)
    if path.name == PYPROJECT_FILE_NAME:
        tool = parsed.get("tool", {})
        owned = tool.get(PYPROJECT_TOOL_KEY, {}) if isinstance(tool, Mapping) else {}
        section = owned.get(CONFIG_SECTION, {}) if isinstance(owned, Mapping) else {}
    else:
        section = parsed.get(CONFIG_SECTION, {})

    if not isinstance(section, Mapping):
        raise ConfigLoadError(f"[{CONFIG_SECTION}] must be a table in {path}")
    if section:
        _logger.debug("config_section_loaded", extra={"path": str(path), "keys": sorted(section)})
    return dict(section)


def _read_toml(path: Path, *, required: bool) -> dict[str, Any]:
    if path.is_file():
        try:
            return tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            raise ConfigLoadError(f"invalid TOML in {path}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigLoadError(f"cannot read {path}: {exc}") from exc
    if required:
        raise ConfigLoadError(f"config file not found: {path}")
    return {}


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field_name in FIELD_NAMES:
        env_name = _env_name_for_field(field_name)
        raw = environ.get(env_name)
        if raw is None:
            continue
        try:
            overrides[field_name] = int(raw.strip())
        except ValueError as exc:
            raise ConfigLoadError(
                f"{env_name} -> {CONFIG_SECTION}.{field_name} must be an integer"
            ) from exc
    return overrides


def _env_name_for_field(field_name: str) -> str:
    return ENV_PREFIX + field_name.upper()


__all__ = [
    "ConfigLoadError",
    "dump_effective_config",
    "load_config",
]
