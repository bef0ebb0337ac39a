"""Calculator modules for the timesheet checker."""

from timesheet_checker.calculators.overtime_reallocator import (
    BASIC_THRESHOLD_MINUTES,
    reallocate_overtime,
    reallocate_weekly,
    sum_buckets,
)
from timesheet_checker.calculators.row_parser import ParsedRow, parse_row
from timesheet_checker.calculators.time_parser import (
    ParseResult,
    ParseStatus,
    parse_break_duration,
    parse_clock_time,
    parse_duration,
)

__all__ = [
    # overtime_reallocator
    "BASIC_THRESHOLD_MINUTES",
    "reallocate_overtime",
    "reallocate_weekly",
    "sum_buckets",
    # row_parser
    "ParsedRow",
    "parse_row",
    # time_parser
    "ParseResult",
    "ParseStatus",
    "parse_break_duration",
    "parse_clock_time",
    "parse_duration",
]
