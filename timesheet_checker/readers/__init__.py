"""Readers for loading timesheet rows from files."""

from timesheet_checker.readers.csv_reader import CsvFormatError, CsvTimesheetReader
from timesheet_checker.readers.docx_reader import (
    DocumentImportError,
    DocumentReadError,
    DocxTimesheetReader,
    NoRowsExtractedError,
    NoTableFoundError,
)
from timesheet_checker.readers.html_table_extractor import (
    extract_rows_from_html,
    extract_week_label,
)
from timesheet_checker.readers.row_loader import load_rows

__all__ = [
    "CsvFormatError",
    "CsvTimesheetReader",
    "DocumentImportError",
    "DocumentReadError",
    "DocxTimesheetReader",
    "NoRowsExtractedError",
    "NoTableFoundError",
    "extract_rows_from_html",
    "extract_week_label",
    "load_rows",
]
