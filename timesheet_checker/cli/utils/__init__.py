"""CLI utility functions."""

from timesheet_checker.cli.utils.formatters import (
    format_error,
    format_heading,
    format_info,
    format_success,
    format_warning,
)

__all__ = [
    "format_error",
    "format_heading",
    "format_info",
    "format_success",
    "format_warning",
]
