"""Unit tests for DocxTimesheetReader."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from timesheet_checker.readers.docx_reader import (
    DocumentReadError,
    DocxTimesheetReader,
    NoRowsExtractedError,
    NoTableFoundError,
)

TIMESHEET_HTML = (
    "<p>Week Number: 12</p>"
    "<table>"
    "<tr><td>Date</td><td>Work Address</td><td>Start</td><td>Finish</td>"
    "<td>Lunch</td><td>Basic</td><td>O/T 1.5</td><td>O/T 2.0</td></tr>"
    "<tr><td>17/03</td><td>Leeds</td><td>8:00</td><td>16:30</td>"
    "<td>30</td><td>8</td><td></td><td></td></tr>"
    "</table>"
)


class TestDocxTimesheetReader:
    """Test suite for DocxTimesheetReader."""

    @pytest.fixture
    def reader(self):
        return DocxTimesheetReader()

    @pytest.fixture
    def docx_path(self, tmp_path):
        path = tmp_path / "week12.docx"
        path.write_bytes(b"placeholder")
        return path

    def _convert(self, html_text, messages=()):
        return patch(
            "timesheet_checker.readers.docx_reader.mammoth.convert_to_html",
            return_value=SimpleNamespace(value=html_text, messages=list(messages)),
        )

    def test_reads_rows(self, reader, docx_path):
        with self._convert(TIMESHEET_HTML, messages=["Unrecognised style"]) as convert:
            rows = reader.read(docx_path)

        convert.assert_called_once()
        assert len(rows) == 1
        assert rows[0].week == "Week 12"
        assert rows[0].notes == "Leeds"
        assert rows[0].basic == "8"

    def test_wrong_extension(self, reader, tmp_path):
        path = tmp_path / "week12.doc"
        path.write_bytes(b"old format")
        with pytest.raises(DocumentReadError, match="not a Word .docx file"):
            reader.read(path)

    def test_missing_file(self, reader, tmp_path):
        with pytest.raises(DocumentReadError, match="Could not open"):
            reader.read(tmp_path / "missing.docx")

    def test_conversion_failure(self, reader, docx_path):
        with patch(
            "timesheet_checker.readers.docx_reader.mammoth.convert_to_html",
            side_effect=KeyError("word/document.xml"),
        ):
            with pytest.raises(DocumentReadError, match="KeyError"):
                reader.read(docx_path)

    def test_no_table(self, reader, docx_path):
        with self._convert("<p>Just a letter</p>"):
            with pytest.raises(NoTableFoundError) as exc_info:
                reader.read(docx_path)
        assert str(exc_info.value) == DocxTimesheetReader.NOT_FOUND_MESSAGE

    def test_table_without_rows(self, reader, docx_path):
        header_only = TIMESHEET_HTML.split("<tr><td>17/03")[0] + "</table>"
        with self._convert(header_only):
            with pytest.raises(NoRowsExtractedError, match="no rows"):
                reader.read(docx_path)
