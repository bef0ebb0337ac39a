"""Timesheet row model.

This module defines the TimeEntryRow model which represents one day's
record exactly as it was typed or imported. All time-related fields stay
as text; minutes are derived from them on every recalculation.
"""

from typing import Any, Literal

from pydantic import Field, field_validator

from timesheet_checker.models.base import BaseDataModel

# Field keys used to tag validation issues
FieldKey = Literal[
    "date",
    "day",
    "week",
    "start",
    "finish",
    "break",
    "basic",
    "ot15",
    "ot20",
    "notes",
]

UNSPECIFIED_WEEK = "Unspecified"


def normalize_week_label(text: str) -> str:
    """Trim a week label, mapping empty text to the unspecified label."""
    label = (text or "").strip()
    return label if label else UNSPECIFIED_WEEK


class TimeEntryRow(BaseDataModel):
    """Represents a single timesheet row.

    The lunch break is stored on the ``lunch`` attribute but is exchanged
    under the ``break`` key, matching the table and issue field keys.

    Attributes:
        index: 1-based position of the row, used for diagnostics only
        date: Date label (opaque text)
        day: Day-of-week label (opaque text)
        week: Week label used as the aggregation key
        start: Start clock time (H:MM)
        finish: Finish clock time (H:MM)
        lunch: Lunch break (H:MM or minutes)
        basic: Basic hours (H:MM or decimal hours)
        ot15: Overtime at 1.5x (H:MM or decimal hours)
        ot20: Overtime at 2.0x (H:MM or decimal hours)
        notes: Free text passed through unchanged

    Example:
        >>> row = TimeEntryRow(index=1, start="9:00", finish="17:00",
        ...                    **{"break": "30"}, basic="7:30")
        >>> row.lunch
        '30'
    """

    index: int = Field(..., ge=1, description="1-based row position")
    date: str = Field("", description="Date label")
    day: str = Field("", description="Day-of-week label")
    week: str = Field("", description="Week label")
    start: str = Field("", description="Start clock time")
    finish: str = Field("", description="Finish clock time")
    lunch: str = Field("", alias="break", description="Lunch break")
    basic: str = Field("", description="Basic hours")
    ot15: str = Field("", description="Overtime hours at 1.5x")
    ot20: str = Field("", description="Overtime hours at 2.0x")
    notes: str = Field("", description="Free-text notes")

    @field_validator(
        "date",
        "day",
        "week",
        "start",
        "finish",
        "lunch",
        "basic",
        "ot15",
        "ot20",
        "notes",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Coerce missing values to empty text and everything else to str."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @property
    def week_label(self) -> str:
        """Return the normalized week label used as the aggregation key."""
        return normalize_week_label(self.week)

    @property
    def label(self) -> str:
        """Return the row label used in diagnostic messages."""
        if self.date:
            return f"Row {self.index} ({self.date})"
        return f"Row {self.index}"

    def text_for(self, field: FieldKey) -> str:
        """Return the raw text of a field by its field key."""
        if field == "break":
            return self.lunch
        return getattr(self, field)
