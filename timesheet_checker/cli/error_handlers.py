"""Error handling for CLI commands.

Import, submission and configuration failures are reported as a single
message with an optional hint, and mapped to a distinct exit code.
"""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from timesheet_checker.cli.utils.formatters import format_error, format_warning
from timesheet_checker.readers.csv_reader import CsvFormatError
from timesheet_checker.readers.docx_reader import DocumentImportError
from timesheet_checker.services.submission_service import (
    MissingRequiredInputError,
    SubmissionError,
)

EXIT_CONFIGURATION = 1
EXIT_SUBMISSION = 2
EXIT_IMPORT = 3
EXIT_MISSING_INPUT = 4
EXIT_ISSUES_FOUND = 5
EXIT_CANCELLED = 130
EXIT_UNEXPECTED = 255


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    exit_code = EXIT_UNEXPECTED
    title = "Error"

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    exit_code = EXIT_CONFIGURATION
    title = "Configuration Error"


class DataValidationError(CLIError):
    """Raised in strict mode when the timesheet has validation issues."""

    exit_code = EXIT_ISSUES_FOUND
    title = "Data Validation Error"


def _report(title: str, message: str, hint: Optional[str] = None) -> None:
    click.echo(format_error(f"{title}: {message}"), err=True)
    if hint:
        click.echo(format_warning(f"Hint: {hint}"), err=True)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code for the error type
    """
    if isinstance(error, CLIError):
        _report(error.title, error.message, error.recovery_hint)
        return error.exit_code

    if isinstance(error, ValidationError):
        _report(
            "Configuration Error",
            str(error),
            "Check the values in your .env file or environment",
        )
        return EXIT_CONFIGURATION

    if isinstance(error, (DocumentImportError, CsvFormatError)):
        _report(
            "Import Error",
            str(error),
            "Use a .csv export or the standard weekly timesheet .docx",
        )
        return EXIT_IMPORT

    if isinstance(error, MissingRequiredInputError):
        _report("Missing Input", str(error))
        return EXIT_MISSING_INPUT

    if isinstance(error, SubmissionError):
        _report(
            "Submission Error",
            str(error),
            "Check SUBMISSION_URL and your network connection, then retry",
        )
        return EXIT_SUBMISSION

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return EXIT_CANCELLED

    _report("Unexpected Error", f"{type(error).__name__}: {error}")
    if debug:
        click.echo("\nFull stack trace:", err=True)
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            ),
            err=True,
        )
    else:
        click.echo(format_warning("Run with --debug for full stack trace"), err=True)
    return EXIT_UNEXPECTED


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Args:
        debug: Whether to show full stack traces

    Returns:
        Context manager that exits with the mapped code on error

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is not None and not isinstance(
                exc_val, (SystemExit, click.ClickException)
            ):
                exit_code = handle_cli_error(exc_val, self.show_debug)
                sys.exit(exit_code)
            return False  # Don't suppress exceptions

    return ErrorHandler(debug)
