"""Single-pass parsing of a timesheet row.

Validation and aggregation both consume the ParsedRow produced here, so
every cell of a row is parsed exactly once per recalculation.
"""

from dataclasses import dataclass

from timesheet_checker.calculators.time_parser import (
    ParseResult,
    parse_break_duration,
    parse_clock_time,
    parse_duration,
)
from timesheet_checker.models.timesheet import TimeEntryRow
from timesheet_checker.models.totals import WeekBucket


@dataclass(frozen=True)
class ParsedRow:
    """A row together with the parse result of each time-related cell.

    Attributes:
        row: The source row (its text stays the source of truth)
        start: Parsed start clock time
        finish: Parsed finish clock time
        lunch: Parsed lunch break
        basic: Parsed basic hours
        ot15: Parsed OT 1.5 hours
        ot20: Parsed OT 2.0 hours
    """

    row: TimeEntryRow
    start: ParseResult
    finish: ParseResult
    lunch: ParseResult
    basic: ParseResult
    ot15: ParseResult
    ot20: ParseResult

    @property
    def week_label(self) -> str:
        return self.row.week_label

    def entered_minutes(self) -> WeekBucket:
        """Entered bucket minutes, with invalid cells folded in as 0."""
        return WeekBucket(
            basic=self.basic.minutes_or_zero,
            ot15=self.ot15.minutes_or_zero,
            ot20=self.ot20.minutes_or_zero,
        )


def parse_row(row: TimeEntryRow) -> ParsedRow:
    """Parse every time-related cell of a row.

    Args:
        row: The row to parse

    Returns:
        ParsedRow holding one ParseResult per cell
    """
    return ParsedRow(
        row=row,
        start=parse_clock_time(row.start),
        finish=parse_clock_time(row.finish),
        lunch=parse_break_duration(row.lunch),
        basic=parse_duration(row.basic),
        ot15=parse_duration(row.ot15),
        ot20=parse_duration(row.ot20),
    )
