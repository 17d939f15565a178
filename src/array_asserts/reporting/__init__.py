"""Message rendering helpers: value export and diagnostic tables."""

from array_asserts.reporting.exporter import (
    Exporter,
    default_exporter,
    export,
    shortened_export,
)
from array_asserts.reporting.table import render_table

__all__ = [
    "Exporter",
    "default_exporter",
    "export",
    "render_table",
    "shortened_export",
]
