"""Timesheet Checker CLI.

This module provides a command-line interface for checking, exporting and
submitting weekly timesheets.
"""

import click

from timesheet_checker import __version__
from timesheet_checker.cli.commands.check import check_timesheet
from timesheet_checker.cli.commands.export import export_csv
from timesheet_checker.cli.commands.submit import submit_timesheet
from timesheet_checker.config.logging_config import LoggingConfig, configure_logging


@click.group(
    help="Timesheet Checker CLI - Validate weekly timesheets and total their hours"
)
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: LOG_LEVEL from the environment, else WARNING)",
)
def cli(log_level):
    """Timesheet Checker CLI main entry point."""
    config = LoggingConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    configure_logging(config)


# Register commands
cli.add_command(check_timesheet)
cli.add_command(export_csv)
cli.add_command(submit_timesheet)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
