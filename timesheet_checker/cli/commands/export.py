"""Export timesheet to CSV command."""

from pathlib import Path
from typing import Optional

import click

from timesheet_checker.cli.error_handlers import with_error_handling
from timesheet_checker.cli.utils.formatters import format_info, format_success
from timesheet_checker.readers.row_loader import load_rows
from timesheet_checker.services.submission_service import MissingRequiredInputError
from timesheet_checker.writers.csv_writer import write_csv


@click.command(name="export-csv")
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output CSV path (default: PATH with a .csv extension)",
)
@click.option("--debug", is_flag=True, default=False, help="Show full stack traces")
def export_csv(path: Path, output: Optional[Path], debug: bool):
    """Export the rows of a timesheet to CSV.

    The cell text is written exactly as entered, so the CSV can be checked
    again later with the check command.

    Example:
        timesheet-cli export-csv week12.docx -o week12.csv
    """
    with with_error_handling(debug):
        destination = output or path.with_suffix(".csv")
        if destination.resolve() == path.resolve():
            raise click.BadParameter(
                "output would overwrite the input file", param_hint="--output"
            )

        click.echo(format_info(f"Reading {path.name}..."))
        rows = load_rows(path)
        if not rows:
            raise MissingRequiredInputError("No rows to export.")

        write_csv(rows, destination)
        click.echo(format_success(f"Exported {len(rows)} rows to {destination}"))
