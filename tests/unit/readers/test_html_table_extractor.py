"""Unit tests for timesheet table extraction from document HTML."""

from timesheet_checker.readers.html_table_extractor import (
    extract_rows_from_html,
    extract_week_label,
    find_timesheet_table,
    parse_html_tables,
    resolve_columns,
    score_header,
)

HEADER = (
    "<tr><td>Date</td><td>Work Address</td><td>Start</td><td>Finish</td>"
    "<td>Lunch</td><td>Basic</td><td>O/T 1.5</td><td>O/T 2.0</td></tr>"
)


def _row(*cells):
    return "<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>"


def _document(*rows, preamble=""):
    return f"{preamble}<table>{HEADER}{''.join(rows)}</table>"


class TestParseHtmlTables:
    """Test HTML table parsing."""

    def test_cell_text_is_collapsed(self):
        tables = parse_html_tables(
            "<table><tr><td> <p>Leeds,</p>\n<p> north</p> </td><td>9:00</td></tr></table>"
        )
        assert tables == [[["Leeds, north", "9:00"]]]

    def test_entities_are_decoded(self):
        tables = parse_html_tables("<table><tr><td>A &amp; B</td></tr></table>")
        assert tables[0][0][0] == "A & B"

    def test_multiple_tables_in_order(self):
        tables = parse_html_tables(
            "<table><tr><td>first</td></tr></table><table><tr><td>second</td></tr></table>"
        )
        assert [table[0] for table in tables] == [["first"], ["second"]]

    def test_nested_table(self):
        tables = parse_html_tables(
            "<table><tr><td>outer<table><tr><td>inner</td></tr></table></td></tr></table>"
        )
        assert len(tables) == 2
        assert tables[1] == [["inner"]]
        assert tables[0][0][0] == "outerinner"


class TestTableSelection:
    """Test header scoring and table choice."""

    def test_score_header(self):
        header = ["Date", "Work Address", "Start", "Finish", "Lunch", "Basic", "O/T 1.5", "O/T 2.0"]
        assert score_header(header) == 9

    def test_score_unrelated_header(self):
        assert score_header(["Name", "Signature"]) == 0

    def test_best_table_wins(self):
        weak = [["Date", "Name"]]
        strong = [["Date", "Start", "Finish"]]
        assert find_timesheet_table([weak, strong]) is strong

    def test_tie_keeps_first(self):
        first = [["Start"]]
        second = [["Finish"]]
        assert find_timesheet_table([first, second]) is first

    def test_no_matching_table(self):
        assert find_timesheet_table([[["Name", "Signature"]], []]) is None


class TestResolveColumns:
    """Test header-to-field mapping."""

    def test_reordered_header(self):
        columns = resolve_columns(["Start", "Finish", "Date", "Basic", "Break"])
        assert columns["start"] == 0
        assert columns["finish"] == 1
        assert columns["date"] == 2
        assert columns["basic"] == 3
        assert columns["lunch"] == 4

    def test_fallback_positions(self):
        columns = resolve_columns(["a", "b", "c", "d", "e", "f", "g", "h"])
        assert columns == {
            "date": 0,
            "notes": 1,
            "start": 2,
            "finish": 3,
            "lunch": 4,
            "basic": 5,
            "ot15": 6,
            "ot20": 7,
        }

    def test_cell_claimed_once(self):
        """Test that "Date Started" is not also taken as the start column."""
        columns = resolve_columns(["Date Started", "Start"])
        assert columns["date"] == 0
        assert columns["start"] == 1


class TestExtractWeekLabel:
    """Test week label derivation."""

    def test_number_and_beginning(self):
        text = "<p>Week Number: 12</p><p>Week Beginning: 17/03/2025</p>"
        assert extract_week_label(text) == "Week 12 – 17/03/2025"

    def test_number_only(self):
        assert extract_week_label("<p>Week Number: 12</p>") == "Week 12"

    def test_beginning_only(self):
        assert extract_week_label("<p>week beginning: 17/03</p>") == "Week of 17/03"

    def test_neither(self):
        assert extract_week_label("<p>Timesheet</p>") == "Unspecified"

    def test_entities_decoded(self):
        assert extract_week_label("<p>Week Number: 3&amp;4</p>") == "Week 3&4"


class TestExtractRowsFromHtml:
    """Test full row extraction."""

    def test_rows_extracted(self):
        document = _document(
            _row("17/03", "Leeds", "8:00", "16:30", "30", "8", "", ""),
            _row("18/03", "York", "7:00", "18:00", "0:30", "8", "2", "0.5"),
            preamble="<p>Week Number: 12</p>",
        )
        rows = extract_rows_from_html(document)

        assert len(rows) == 2
        first, second = rows
        assert first.index == 1
        assert first.date == "17/03"
        assert first.notes == "Leeds"
        assert first.start == "8:00"
        assert first.finish == "16:30"
        assert first.lunch == "30"
        assert first.basic == "8"
        assert first.day == ""
        assert first.week == "Week 12"
        assert second.index == 2
        assert second.ot15 == "2"
        assert second.ot20 == "0.5"

    def test_rows_without_times_are_dropped(self):
        document = _document(
            _row("17/03", "Leeds", "", "", "", "", "", ""),
            _row("18/03", "York", "", "", "", "8", "", ""),
            _row("", "", "", "", "", "", "", ""),
        )
        rows = extract_rows_from_html(document)
        assert [row.date for row in rows] == ["18/03"]
        assert rows[0].index == 1

    def test_short_rows_pad_with_empty(self):
        rows = extract_rows_from_html(_document(_row("17/03", "Leeds", "8:00")))
        assert rows[0].start == "8:00"
        assert rows[0].finish == ""
        assert rows[0].ot20 == ""

    def test_header_only_table(self):
        assert extract_rows_from_html(_document()) == []

    def test_no_table(self):
        assert extract_rows_from_html("<p>Hello</p>") is None

    def test_unrelated_table(self):
        assert extract_rows_from_html("<table><tr><td>Name</td></tr></table>") is None
