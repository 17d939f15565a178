"""Public observability primitives: structured logging for the constraint engine."""

from array_asserts.observability.logging import (
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
