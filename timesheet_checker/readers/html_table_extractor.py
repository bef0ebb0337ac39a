"""Extraction of timesheet rows from converted document HTML.

Word timesheets are converted to HTML before they reach this module. The
extractor finds the table that looks most like a timesheet, maps its
columns to row fields from the header text, and reads one row per data
line. It is a best-effort adapter: the rows it returns are plain text and
go through the same validation as rows entered by hand.
"""

import html
import logging
import re
from html.parser import HTMLParser
from typing import Dict, List, Optional

from timesheet_checker.models.timesheet import UNSPECIFIED_WEEK, TimeEntryRow

logger = logging.getLogger(__name__)

Table = List[List[str]]

# One point per keyword found in any header cell
HEADER_KEYWORDS = ["date", "work", "start", "finish", "lunch", "basic", "o/t", "1.5", "2.0"]

# (row field, header substrings, fallback column position)
COLUMN_HINTS = [
    ("date", ("date",), 0),
    ("notes", ("work", "address", "site"), 1),
    ("start", ("start",), 2),
    ("finish", ("finish",), 3),
    ("lunch", ("lunch", "break"), 4),
    ("basic", ("basic",), 5),
    ("ot15", ("1.5",), 6),
    ("ot20", ("2.0",), 7),
]

# A data row needs at least one of these to be kept
TIME_FIELDS = ("start", "finish", "basic", "ot15", "ot20")

_WEEK_NUMBER_PATTERN = re.compile(r"Week Number:\s*([^<\r\n]+)", re.IGNORECASE)
_WEEK_BEGINNING_PATTERN = re.compile(r"Week Beginning:\s*([^<\r\n]+)", re.IGNORECASE)


class _TableState:
    def __init__(self, rows: Table):
        self.rows = rows
        self.row: Optional[List[str]] = None
        self.cell: Optional[List[str]] = None

    def close_cell(self) -> None:
        if self.cell is not None and self.row is not None:
            self.row.append(" ".join("".join(self.cell).split()))
        self.cell = None

    def close_row(self) -> None:
        self.close_cell()
        if self.row is not None:
            self.rows.append(self.row)
        self.row = None


class _TableCollector(HTMLParser):
    """Collects the text of every table cell, tables in document order."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.tables: List[Table] = []
        self._open: List[_TableState] = []

    def handle_starttag(self, tag, attrs):
        if tag == "table":
            rows: Table = []
            self.tables.append(rows)
            self._open.append(_TableState(rows))
        elif not self._open:
            return
        elif tag == "tr":
            state = self._open[-1]
            state.close_row()
            state.row = []
        elif tag in ("td", "th"):
            state = self._open[-1]
            state.close_cell()
            if state.row is None:
                state.row = []
            state.cell = []

    def handle_endtag(self, tag):
        if not self._open:
            return
        state = self._open[-1]
        if tag in ("td", "th"):
            state.close_cell()
        elif tag == "tr":
            state.close_row()
        elif tag == "table":
            state.close_row()
            self._open.pop()

    def handle_data(self, data):
        # Nested table text also belongs to the enclosing cells
        for state in self._open:
            if state.cell is not None:
                state.cell.append(data)


def parse_html_tables(document_html: str) -> List[Table]:
    """Parse every table in the HTML into rows of cell text.

    Args:
        document_html: HTML produced by the document conversion

    Returns:
        Tables in document order, each a list of rows of stripped cell text
    """
    collector = _TableCollector()
    collector.feed(document_html)
    collector.close()
    return collector.tables


def score_header(header: List[str]) -> int:
    """Count the header keywords that appear in any header cell."""
    lowered = [cell.lower() for cell in header]
    return sum(1 for keyword in HEADER_KEYWORDS if any(keyword in cell for cell in lowered))


def find_timesheet_table(tables: List[Table]) -> Optional[Table]:
    """Pick the table whose first row scores highest against the keywords.

    Ties keep the first table; a best score of zero means no table.

    Args:
        tables: Parsed tables in document order

    Returns:
        The best matching table, or None when no table matches
    """
    best_table: Optional[Table] = None
    best_score = 0

    for table in tables:
        if not table:
            continue
        score = score_header(table[0])
        if score > best_score:
            best_score = score
            best_table = table

    return best_table


def resolve_columns(header: List[str]) -> Dict[str, int]:
    """Map row fields to column positions from the header text.

    Each header cell is claimed by at most one field. Fields whose hint is
    not found fall back to a fixed position.

    Args:
        header: Header row cell text

    Returns:
        Column position per row field
    """
    lowered = [cell.lower() for cell in header]
    claimed = set()
    columns: Dict[str, int] = {}

    for field, hints, fallback in COLUMN_HINTS:
        match = next(
            (
                position
                for position, cell in enumerate(lowered)
                if position not in claimed and any(hint in cell for hint in hints)
            ),
            None,
        )
        if match is None:
            columns[field] = fallback
        else:
            columns[field] = match
            claimed.add(match)

    return columns


def extract_week_label(document_html: str) -> str:
    """Derive a week label from "Week Number:" / "Week Beginning:" text.

    Args:
        document_html: HTML produced by the document conversion

    Returns:
        "Week X – Y", "Week X", "Week of Y" or "Unspecified"
    """
    number_match = _WEEK_NUMBER_PATTERN.search(document_html)
    beginning_match = _WEEK_BEGINNING_PATTERN.search(document_html)
    number = html.unescape(number_match.group(1)).strip() if number_match else ""
    beginning = html.unescape(beginning_match.group(1)).strip() if beginning_match else ""

    if number and beginning:
        return f"Week {number} – {beginning}"
    if number:
        return f"Week {number}"
    if beginning:
        return f"Week of {beginning}"
    return UNSPECIFIED_WEEK


def extract_rows_from_html(document_html: str) -> Optional[List[TimeEntryRow]]:
    """Extract timesheet rows from converted document HTML.

    Args:
        document_html: HTML produced by the document conversion

    Returns:
        Rows numbered from 1 (possibly empty when the table has no data
        lines), or None when no timesheet table was found
    """
    table = find_timesheet_table(parse_html_tables(document_html))
    if table is None:
        logger.info("No timesheet table found in document")
        return None

    columns = resolve_columns(table[0])
    week_label = extract_week_label(document_html)
    rows: List[TimeEntryRow] = []

    for cells in table[1:]:
        if not cells:
            continue

        values = {
            field: cells[position] if 0 <= position < len(cells) else ""
            for field, position in columns.items()
        }
        if not any(values[field] for field in TIME_FIELDS):
            continue

        rows.append(
            TimeEntryRow(
                index=len(rows) + 1,
                date=values["date"],
                day="",
                week=week_label,
                start=values["start"],
                finish=values["finish"],
                lunch=values["lunch"],
                basic=values["basic"],
                ot15=values["ot15"],
                ot20=values["ot20"],
                notes=values["notes"],
            )
        )

    logger.info(f"Extracted {len(rows)} rows for '{week_label}'")
    return rows
