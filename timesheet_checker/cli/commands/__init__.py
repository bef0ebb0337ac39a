"""CLI commands."""

from timesheet_checker.cli.commands.check import check_timesheet
from timesheet_checker.cli.commands.export import export_csv
from timesheet_checker.cli.commands.submit import submit_timesheet

__all__ = ["check_timesheet", "export_csv", "submit_timesheet"]
