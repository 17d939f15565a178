from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from array_asserts.constants import ENV_PREFIX
from array_asserts.reporting.exporter import default_exporter

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_reporting_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep the process-wide exporter on built-in defaults for every test."""

    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    default_exporter.cache_clear()
    yield
    default_exporter.cache_clear()
