"""Check timesheet command."""

from pathlib import Path

import click

from timesheet_checker.aggregators.timesheet_aggregator import recalculate
from timesheet_checker.cli.error_handlers import DataValidationError, with_error_handling
from timesheet_checker.cli.utils.formatters import (
    format_error,
    format_heading,
    format_info,
    format_success,
    format_warning,
)
from timesheet_checker.config.settings import get_config
from timesheet_checker.readers.row_loader import load_rows
from timesheet_checker.writers.report_formatter import (
    format_issue_breakdown,
    format_issues,
    format_overall_summary,
    format_weekly_summary,
)


@click.command(name="check")
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with a non-zero code when issues are found",
)
@click.option(
    "--weekly/--no-weekly",
    default=True,
    help="Show totals per week (default: shown)",
)
@click.option("--debug", is_flag=True, default=False, help="Show full stack traces")
def check_timesheet(path: Path, strict: bool, weekly: bool, debug: bool):
    """Validate a timesheet and show its totals.

    PATH is a .csv export or a weekly timesheet .docx. Overtime is only
    counted once a week has 40 basic hours; the totals shown are after
    that adjustment.

    Example:
        timesheet-cli check week12.docx
        timesheet-cli check march.csv --strict --no-weekly
    """
    with with_error_handling(debug):
        settings = get_config()
        click.echo(format_info(f"Checking {path.name}..."))

        rows = load_rows(path)
        summary = recalculate(
            rows,
            basic_threshold=settings.basic_threshold_minutes,
            tolerance_minutes=settings.mismatch_tolerance_minutes,
        )

        click.echo()
        click.echo(format_heading("Overall Totals"))
        click.echo(format_overall_summary(summary))

        if weekly:
            click.echo()
            click.echo(format_heading("Weekly Totals"))
            click.echo(format_weekly_summary(summary))

        click.echo()
        click.echo(format_heading("Issues"))
        report = summary.report

        if report.is_valid():
            click.echo(format_success(report.summary()))
            return

        for line in format_issues(report).splitlines():
            click.echo(format_error(line))
        click.echo()
        click.echo(format_warning(report.summary()))
        for line in format_issue_breakdown(report).splitlines():
            click.echo(f"  {line}")

        if strict:
            raise DataValidationError(
                f"{report.issue_count} issue(s) found in {path.name}",
                "Fix the listed rows and run the check again",
            )
