"""Row-level consistency checks for timesheet rows.

This module provides the RowValidator class which checks each parsed row
for malformed cells and compares the worked interval (finish - start -
lunch) against the hours entered in the basic and overtime columns.
"""

import logging
from typing import List, Sequence

from timesheet_checker.calculators.row_parser import ParsedRow
from timesheet_checker.calculators.time_parser import ParseResult
from timesheet_checker.validators.validation_report import (
    IssueKind,
    ValidationReport,
)
from timesheet_checker.writers.report_formatter import format_hm

logger = logging.getLogger(__name__)

# Minutes of rounding slack allowed between worked and entered time
MISMATCH_TOLERANCE_MINUTES = 1

# (field key, attribute on ParsedRow, label used in messages)
_ENTERED_FIELDS = [
    ("break", "lunch", "Lunch value"),
    ("basic", "basic", "Basic hours"),
    ("ot15", "ot15", "OT 1.5 hours"),
    ("ot20", "ot20", "OT 2.0 hours"),
]


class RowValidator:
    """Validator for parsed timesheet rows.

    Issues never stop processing: a row with issues is still aggregated
    with its invalid cells counted as zero. The validator only reports.

    Example:
        >>> validator = RowValidator()
        >>> report = validator.validate_rows([parse_row(row)])
        >>> report.is_valid()
        True
    """

    def __init__(self, tolerance_minutes: int = MISMATCH_TOLERANCE_MINUTES) -> None:
        """Initialize the validator.

        Args:
            tolerance_minutes: Allowed difference between worked and entered
                minutes before a mismatch is reported (default: 1)
        """
        self.tolerance_minutes = tolerance_minutes

    def validate_row(self, parsed: ParsedRow) -> ValidationReport:
        """Validate a single parsed row.

        Args:
            parsed: The row and its parsed cells

        Returns:
            ValidationReport with any issues found, in field order
        """
        report = ValidationReport(rows_checked=1)
        row = parsed.row
        context = {"label": row.label, "date": row.date}

        for field, attribute, description in _ENTERED_FIELDS:
            result: ParseResult = getattr(parsed, attribute)
            text = row.text_for(field)
            if result.is_invalid and text:
                kind = (
                    IssueKind.INVALID_TIME_FORMAT
                    if ":" in text
                    else IssueKind.INVALID_DURATION_FORMAT
                )
                report.add_issue(
                    row.index,
                    field,
                    kind,
                    f'{description} "{text}" is invalid.',
                    text,
                    dict(context),
                )

        self._check_worked_time(parsed, report, context)
        return report

    def validate_rows(self, parsed_rows: Sequence[ParsedRow]) -> ValidationReport:
        """Validate multiple parsed rows.

        Args:
            parsed_rows: Parsed rows in display order

        Returns:
            ValidationReport with all issues found across all rows
        """
        combined_report = ValidationReport()
        for parsed in parsed_rows:
            combined_report.merge(self.validate_row(parsed))

        logger.debug(
            f"Validated {combined_report.rows_checked} rows, "
            f"found {combined_report.issue_count} issue(s)"
        )
        return combined_report

    def _check_worked_time(
        self, parsed: ParsedRow, report: ValidationReport, context: dict
    ) -> None:
        """Compare the clocked interval with the entered hours.

        Skipped silently when start, finish or lunch cannot be resolved.
        """
        resolvable: List[ParseResult] = [parsed.start, parsed.finish, parsed.lunch]
        if not all(result.is_resolved for result in resolvable):
            return

        row = parsed.row
        worked = (
            parsed.finish.minutes_or_zero
            - parsed.start.minutes_or_zero
            - parsed.lunch.minutes_or_zero
        )

        if worked < 0:
            report.add_issue(
                row.index,
                "finish",
                IssueKind.NEGATIVE_INTERVAL,
                "Finish time is before start time after lunch.",
                row.finish,
                dict(context),
            )
            return

        entered = parsed.entered_minutes().total
        difference = abs(entered - worked)
        if difference > self.tolerance_minutes:
            report.add_issue(
                row.index,
                "basic",
                IssueKind.INCONSISTENT_ROW,
                f"Worked = {format_hm(worked)}, but Basic + OT = "
                f"{format_hm(entered)} (difference {format_hm(difference)}).",
                entered,
                dict(context),
            )
