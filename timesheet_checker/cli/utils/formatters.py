"""Output formatting utilities for CLI."""

import click


def format_success(message: str) -> str:
    """Format a success message with green color.

    Args:
        message: The success message to format

    Returns:
        Formatted success message with color
    """
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with color
    """
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_heading(title: str, width: int = 60) -> str:
    """Format a section heading framed by rules.

    Args:
        title: Heading text
        width: Width of the rule lines (default: 60)

    Returns:
        Three-line heading
    """
    rule = "=" * width
    return f"{rule}\n{click.style(title, bold=True)}\n{rule}"
