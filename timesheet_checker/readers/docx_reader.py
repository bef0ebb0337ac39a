"""Reader for Word (.docx) weekly timesheets.

The document is converted to HTML with mammoth and the timesheet table is
then located by html_table_extractor. Failures are raised as
DocumentImportError subclasses so the caller can show a single message
without touching rows it already holds.
"""

import logging
from pathlib import Path
from typing import List, Union

import mammoth

from timesheet_checker.models.timesheet import TimeEntryRow
from timesheet_checker.readers.html_table_extractor import extract_rows_from_html
from timesheet_checker.utils.logging_utils import LogContext, log_function_call

logger = logging.getLogger(__name__)


class DocumentImportError(Exception):
    """Base class for failures importing a timesheet document."""

    pass


class DocumentReadError(DocumentImportError):
    """Raised when the file cannot be read or converted."""

    pass


class NoTableFoundError(DocumentImportError):
    """Raised when the document contains no timesheet-like table."""

    pass


class NoRowsExtractedError(DocumentImportError):
    """Raised when the timesheet table has no data rows."""

    pass


class DocxTimesheetReader:
    """Reader for weekly timesheets stored as Word documents.

    Example:
        >>> reader = DocxTimesheetReader()
        >>> rows = reader.read("week12.docx")
        >>> rows[0].week
        'Week 12 – 17/03/2025'
    """

    NOT_FOUND_MESSAGE = (
        "Could not find a timesheet table in that Word document. "
        "Make sure it's the standard weekly timesheet template."
    )

    @log_function_call
    def read(self, path: Union[str, Path]) -> List[TimeEntryRow]:
        """Read timesheet rows from a .docx file.

        Args:
            path: Path to the Word document

        Returns:
            Extracted rows, numbered from 1

        Raises:
            DocumentReadError: If the file is not a readable .docx
            NoTableFoundError: If no timesheet table is present
            NoRowsExtractedError: If the table has no data rows
        """
        source = Path(path)
        with LogContext(source=source.name):
            document_html = self.convert_to_html(source)
            rows = extract_rows_from_html(document_html)

            if rows is None:
                raise NoTableFoundError(self.NOT_FOUND_MESSAGE)
            if not rows:
                raise NoRowsExtractedError(
                    f"The timesheet table in {source.name} has no rows with times "
                    "or hours."
                )

            logger.info(f"Imported {len(rows)} rows from {source.name}")
            return rows

    def convert_to_html(self, path: Path) -> str:
        """Convert a .docx file to HTML.

        Args:
            path: Path to the Word document

        Returns:
            HTML text of the document body

        Raises:
            DocumentReadError: If the file is not a readable .docx
        """
        if path.suffix.lower() != ".docx":
            raise DocumentReadError(
                f"{path.name} is not a Word .docx file (weekly timesheet expected)."
            )

        try:
            with path.open("rb") as docx_file:
                result = mammoth.convert_to_html(docx_file)
        except OSError as e:
            raise DocumentReadError(f"Could not open {path.name}: {e}") from e
        except Exception as e:
            raise DocumentReadError(
                f"There was a problem reading {path.name} as a .docx file: "
                f"{type(e).__name__}: {e}"
            ) from e

        for message in result.messages:
            logger.debug(f"Conversion message for {path.name}: {message}")

        return result.value
