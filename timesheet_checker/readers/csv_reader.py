"""Reader for timesheets previously exported to CSV.

The file is read with pandas using the export headers. Every cell is kept
as text, blanks stay empty rather than becoming NaN, and rows are numbered
from 1 in file order.
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from timesheet_checker.models.timesheet import TimeEntryRow
from timesheet_checker.writers.csv_writer import CSV_COLUMNS

logger = logging.getLogger(__name__)


class CsvFormatError(Exception):
    """Raised when a CSV file does not follow the export layout."""

    pass


class CsvTimesheetReader:
    """Reader for timesheet CSV files in the export layout.

    Columns are matched by header name, ignoring case and surrounding
    whitespace. Missing columns read as empty text; at least one of the
    export headers must be present.
    """

    def read(self, path: Union[str, Path]) -> List[TimeEntryRow]:
        """Read timesheet rows from a CSV file.

        Args:
            path: Path to the CSV file

        Returns:
            Rows numbered from 1 in file order

        Raises:
            CsvFormatError: If the file is empty or has none of the headers
        """
        source = Path(path)
        try:
            df = pd.read_csv(source, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError as e:
            raise CsvFormatError(f"{source.name} is empty") from e
        except pd.errors.ParserError as e:
            raise CsvFormatError(f"{source.name} is not valid CSV: {e}") from e
        except UnicodeDecodeError as e:
            raise CsvFormatError(f"{source.name} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise CsvFormatError(f"Could not open {source.name}: {e}") from e

        return self.rows_from_frame(df, source.name)

    def rows_from_frame(self, df: pd.DataFrame, source: str = "<frame>") -> List[TimeEntryRow]:
        """Convert a text DataFrame in the export layout into rows.

        Args:
            df: DataFrame whose columns are export headers
            source: Name used in error and log messages

        Returns:
            Rows numbered from 1 in frame order
        """
        by_name = {str(column).strip().lower(): column for column in df.columns}
        present = {
            attr: by_name[header.lower()]
            for header, attr in CSV_COLUMNS
            if header.lower() in by_name
        }
        if not present:
            raise CsvFormatError(
                f"{source} has none of the expected columns: "
                f"{', '.join(header for header, _ in CSV_COLUMNS)}"
            )

        rows = []
        for position, record in enumerate(df.to_dict(orient="records"), start=1):
            values = {attr: record[column] for attr, column in present.items()}
            rows.append(TimeEntryRow(index=position, **values))

        logger.info(f"Read {len(rows)} rows from {source}")
        return rows
