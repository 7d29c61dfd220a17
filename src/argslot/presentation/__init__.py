"""Presentation helpers for hosts that display usage and diagnostics."""

from argslot.presentation.formatters import (
    build_values_table,
    format_errors_text,
    format_usage_text,
)

__all__ = [
    "build_values_table",
    "format_errors_text",
    "format_usage_text",
]
