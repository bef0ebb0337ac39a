"""Parsing of free-text clock times and durations into minutes.

This module converts the text typed into a timesheet row into integer
minutes:
- Clock times ("9:30") for the start and finish columns
- Hour durations ("7:30" or "7.5") for the basic and overtime columns
- Break durations ("0:30" or "30") where a bare number means minutes

Every parser returns a ParseResult instead of raising, so that a malformed
cell can be reported by the validator while still folding into totals as 0.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional

# Plain decimal grammar: no exponent, inf/nan, hex or digit separators
_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

# Largest number accepted in any cell part, hours or minutes
MAX_CELL_NUMBER = 10**6


class ParseStatus(Enum):
    """Outcome of parsing a single cell."""

    EMPTY = "empty"
    VALUE = "value"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParseResult:
    """Tri-state result of parsing a cell.

    Attributes:
        status: Whether the cell was empty, parsed, or invalid
        minutes: Parsed minutes (0 for EMPTY, None for INVALID)
    """

    status: ParseStatus
    minutes: Optional[int] = None

    @classmethod
    def empty(cls) -> "ParseResult":
        return cls(ParseStatus.EMPTY, 0)

    @classmethod
    def value(cls, minutes: int) -> "ParseResult":
        return cls(ParseStatus.VALUE, minutes)

    @classmethod
    def invalid(cls) -> "ParseResult":
        return cls(ParseStatus.INVALID, None)

    @property
    def is_invalid(self) -> bool:
        return self.status is ParseStatus.INVALID

    @property
    def is_resolved(self) -> bool:
        """True when the cell yields a usable number of minutes."""
        return self.status is not ParseStatus.INVALID

    @property
    def minutes_or_zero(self) -> int:
        """Minutes to add into a sum; invalid cells count as 0."""
        return self.minutes if self.minutes is not None else 0


def _parse_number(text: str) -> Optional[Decimal]:
    """Parse a bounded decimal number, returning None when malformed."""
    candidate = text.strip()
    if not _NUMBER_PATTERN.match(candidate):
        return None
    value = Decimal(candidate)
    if abs(value) > MAX_CELL_NUMBER:
        return None
    return value


def _round_minutes(value: Decimal) -> int:
    """Round a minute count to an integer, halves away from zero."""
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def _parse_hours_and_minutes(text: str) -> ParseResult:
    """Parse "H:MM" text, shared by clock times and clock-shaped durations.

    A blank side of the colon counts as zero, so "7:" is 7:00 and ":30" is
    0:30.
    """
    parts = text.strip().split(":")
    if len(parts) != 2:
        return ParseResult.invalid()

    hours, minutes = (
        _parse_number(part) if part.strip() else Decimal(0) for part in parts
    )
    if hours is None or minutes is None:
        return ParseResult.invalid()
    if hours < 0 or minutes < 0 or minutes >= 60:
        return ParseResult.invalid()

    return ParseResult.value(_round_minutes(hours * 60 + minutes))


def parse_clock_time(text: Optional[str]) -> ParseResult:
    """Parse a 24-hour clock time into minutes since midnight.

    The hour has no upper bound, so "24:00" and "26:15" are accepted for
    shifts that run past midnight. Empty text is invalid: a missing clock
    time cannot stand in for midnight.

    Args:
        text: Clock time text such as "9:30"

    Returns:
        ParseResult with minutes since midnight, or INVALID

    Example:
        >>> parse_clock_time("9:30").minutes
        570
        >>> parse_clock_time("9:60").is_invalid
        True
    """
    if not text or not text.strip():
        return ParseResult.invalid()
    return _parse_hours_and_minutes(text)


def parse_duration(text: Optional[str]) -> ParseResult:
    """Parse an hour duration into minutes.

    Accepts "H:MM" or a bare decimal number of hours. Empty text means the
    value was not entered and yields the EMPTY (zero) result.

    Args:
        text: Duration text such as "7:30" or "7.5"

    Returns:
        ParseResult with minutes, EMPTY, or INVALID

    Example:
        >>> parse_duration("1.5").minutes
        90
        >>> parse_duration("").minutes
        0
    """
    if not text or not text.strip():
        return ParseResult.empty()

    trimmed = text.strip()
    if ":" in trimmed:
        return _parse_hours_and_minutes(trimmed)

    hours = _parse_number(trimmed)
    if hours is None or hours < 0:
        return ParseResult.invalid()
    return ParseResult.value(_round_minutes(hours * 60))


def parse_break_duration(text: Optional[str]) -> ParseResult:
    """Parse a lunch break into minutes.

    Unlike parse_duration, a bare number is a count of minutes, not hours:
    "30" is half an hour while "0:30" is the same half hour in clock form.

    Args:
        text: Break text such as "30" or "0:30"

    Returns:
        ParseResult with minutes, EMPTY, or INVALID

    Example:
        >>> parse_break_duration("30").minutes
        30
        >>> parse_break_duration("0:45").minutes
        45
    """
    if not text or not text.strip():
        return ParseResult.empty()

    trimmed = text.strip()
    if ":" in trimmed:
        return parse_duration(trimmed)

    minutes = _parse_number(trimmed)
    if minutes is None or minutes < 0:
        return ParseResult.invalid()
    return ParseResult.value(_round_minutes(minutes))
