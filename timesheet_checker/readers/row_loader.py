"""Choose a reader from the file extension and load rows."""

from pathlib import Path
from typing import List, Union

from timesheet_checker.models.timesheet import TimeEntryRow
from timesheet_checker.readers.csv_reader import CsvTimesheetReader
from timesheet_checker.readers.docx_reader import DocumentReadError, DocxTimesheetReader


def load_rows(path: Union[str, Path]) -> List[TimeEntryRow]:
    """Load timesheet rows from a .csv or .docx file.

    Args:
        path: Path to the timesheet file

    Returns:
        Rows numbered from 1

    Raises:
        DocumentReadError: If the extension is not supported
    """
    source = Path(path)
    suffix = source.suffix.lower()

    if suffix == ".csv":
        return CsvTimesheetReader().read(source)
    if suffix == ".docx":
        return DocxTimesheetReader().read(source)

    raise DocumentReadError(
        f"Unsupported file type '{source.suffix}': expected a .csv or .docx timesheet"
    )
