"""JSON-lines logging for the ``array_asserts`` logger hierarchy.

The library only ever logs at DEBUG; nothing is printed unless the
application calls :func:`setup_logging` or configures ``array_asserts``
itself.
"""

from __future__ import annotations

import json
import logging
import math
import threading
from collections.abc import Mapping
from datetime import UTC, datetime
from os import PathLike
from typing import IO, Final

from array_asserts.constants import LOGGER_NAME

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

_NON_FINITE: Final[str] = "<non-finite>"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}

_handler_lock = threading.Lock()
_installed_handler: logging.Handler | None = None


class _EventFormatter(logging.Formatter):
    """One sorted, compact JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, JSONValue] = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields = {
            key: _to_json(value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }
        if fields:
            event["fields"] = fields
        if record.exc_info:
            event["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            event["stack"] = self.formatStack(record.stack_info)

        return json.dumps(event, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``name``."""

    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(
    level: int | str = "INFO",
    *,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Send ``array_asserts`` records to ``stream`` (stderr by default) as JSON lines.

    A second call swaps the handler installed by the first one.
    """

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(_EventFormatter())

    logger = get_logger()
    logger.setLevel(resolved)

    global _installed_handler
    with _handler_lock:
        previous, _installed_handler = _installed_handler, handler
        logger.addHandler(handler)
        if previous is not None:
            logger.removeHandler(previous)
            previous.close()
    return logger


def shutdown_logging() -> None:
    """Remove the handler added by :func:`setup_logging` and reset the level."""

    global _installed_handler
    with _handler_lock:
        handler, _installed_handler = _installed_handler, None
    if handler is None:
        return

    logger = get_logger()
    logger.removeHandler(handler)
    handler.flush()
    handler.close()
    logger.setLevel(logging.NOTSET)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, bool) or not isinstance(level, (int, str)):
        raise ValueError(f"level must be int or str, got {type(level).__name__}")
    if isinstance(level, int):
        return level

    known = logging.getLevelNamesMapping()
    try:
        return known[level.strip().upper()]
    except KeyError:
        raise ValueError(f"unsupported logging level {level!r}") from None


def _utc_timestamp(created: float) -> str:
    moment = datetime.fromtimestamp(created, tz=UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_json(value: object) -> JSONValue:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else _NON_FINITE
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, PathLike):
        return str(value)
    if isinstance(value, Mapping):
        return {str(key): _to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_json(item) for item in value]
    return repr(value)


__all__ = [
    "JSONScalar",
    "JSONValue",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
