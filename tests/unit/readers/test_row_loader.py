"""Unit tests for load_rows dispatch."""

from unittest.mock import patch

import pytest

from timesheet_checker.readers.docx_reader import DocumentReadError
from timesheet_checker.readers.row_loader import load_rows
from timesheet_checker.writers.csv_writer import write_csv


class TestLoadRows:
    def test_csv(self, tmp_path, sample_rows):
        path = write_csv(sample_rows, tmp_path / "week.CSV")
        rows = load_rows(path)
        assert [row.basic for row in rows] == ["8"] * 5

    def test_docx(self, tmp_path):
        path = tmp_path / "week.docx"
        with patch(
            "timesheet_checker.readers.row_loader.DocxTimesheetReader.read",
            return_value=[],
        ) as read:
            assert load_rows(path) == []
        read.assert_called_once_with(path)

    def test_unsupported_extension(self, tmp_path):
        with pytest.raises(DocumentReadError, match="Unsupported file type '.txt'"):
            load_rows(tmp_path / "week.txt")
