"""CSV export of timesheet rows.

The export keeps the text of every cell exactly as entered; nothing is
recomputed. Fields containing a comma, a quote or a newline are quoted,
with inner quotes doubled.
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import pandas as pd

from timesheet_checker.models.timesheet import TimeEntryRow

logger = logging.getLogger(__name__)

# (CSV header, TimeEntryRow attribute)
CSV_COLUMNS: List[Tuple[str, str]] = [
    ("Date", "date"),
    ("Day", "day"),
    ("Week", "week"),
    ("Start", "start"),
    ("Finish", "finish"),
    ("Lunch", "lunch"),
    ("BasicHours", "basic"),
    ("OT1_5Hours", "ot15"),
    ("OT2_0Hours", "ot20"),
    ("Notes", "notes"),
]

CSV_HEADER: List[str] = [header for header, _ in CSV_COLUMNS]


def rows_to_frame(rows: Sequence[TimeEntryRow]) -> pd.DataFrame:
    """Build a text-only DataFrame with one column per export header.

    Args:
        rows: Rows in display order

    Returns:
        DataFrame with the export headers as columns
    """
    records = [[getattr(row, attr) for _, attr in CSV_COLUMNS] for row in rows]
    return pd.DataFrame(records, columns=CSV_HEADER, dtype=str)


def rows_to_csv(rows: Sequence[TimeEntryRow]) -> str:
    """Serialize rows to CSV text.

    Lines are joined with "\\n" and there is no trailing newline.

    Args:
        rows: Rows in display order

    Returns:
        CSV text starting with the header line

    Example:
        >>> rows_to_csv([])
        'Date,Day,Week,Start,Finish,Lunch,BasicHours,OT1_5Hours,OT2_0Hours,Notes'
    """
    text = rows_to_frame(rows).to_csv(index=False, lineterminator="\n")
    return text[:-1] if text.endswith("\n") else text


def write_csv(rows: Sequence[TimeEntryRow], path: Union[str, Path]) -> Path:
    """Write rows to a CSV file.

    Args:
        rows: Rows in display order
        path: Destination file path

    Returns:
        Path of the written file
    """
    output = Path(path)
    output.write_text(rows_to_csv(rows), encoding="utf-8")
    logger.info(f"Wrote {len(rows)} rows to {output}")
    return output
