"""Submit timesheet command."""

from pathlib import Path
from typing import Optional

import click

from timesheet_checker.cli.error_handlers import ConfigurationError, with_error_handling
from timesheet_checker.cli.utils.formatters import format_info, format_success
from timesheet_checker.config.settings import get_config
from timesheet_checker.readers.row_loader import load_rows
from timesheet_checker.services.retry_handler import RetryHandler
from timesheet_checker.services.submission_service import (
    SubmissionService,
    build_payload,
)


@click.command(name="submit")
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--name", "employee_name", type=str, default=None, help="Employee name")
@click.option(
    "--from", "period_start", type=str, default=None, help="First day of the period"
)
@click.option("--to", "period_end", type=str, default=None, help="Last day of the period")
@click.option(
    "--url",
    type=str,
    default=None,
    help="Submission endpoint (default: SUBMISSION_URL from the environment)",
)
@click.option("--debug", is_flag=True, default=False, help="Show full stack traces")
def submit_timesheet(
    path: Path,
    employee_name: Optional[str],
    period_start: Optional[str],
    period_end: Optional[str],
    url: Optional[str],
    debug: bool,
):
    """Submit a timesheet to the hosted form.

    Sends the employee name, the period, the overall totals and the CSV
    export of PATH.

    Example:
        timesheet-cli submit week12.docx --name "Jo Bloggs" \\
            --from 17/03/2025 --to 23/03/2025
    """
    with with_error_handling(debug):
        settings = get_config()
        rows = load_rows(path)
        payload = build_payload(
            employee_name,
            period_start,
            period_end,
            rows,
            basic_threshold=settings.basic_threshold_minutes,
        )

        endpoint = url or settings.submission_url
        if not endpoint:
            raise ConfigurationError(
                "No submission endpoint configured",
                "Set SUBMISSION_URL in your .env file or pass --url",
            )

        service = SubmissionService(
            endpoint,
            timeout=settings.submission_timeout,
            retry_handler=RetryHandler(
                max_retries=settings.max_retries, base_delay=settings.retry_delay
            ),
        )
        click.echo(format_info(f"Submitting {len(rows)} rows for {payload.employee_name}..."))
        service.submit(payload)
        click.echo(format_success("Timesheet submitted"))
