"""Tests for report text rendering."""

from timesheet_checker.aggregators.timesheet_aggregator import recalculate
from timesheet_checker.writers.report_formatter import (
    format_hm,
    format_issue_breakdown,
    format_issues,
    format_overall_summary,
    format_weekly_summary,
)


class TestFormatHM:
    def test_hours_and_minutes(self):
        assert format_hm(450) == "7h 30m"

    def test_zero(self):
        assert format_hm(0) == "0h 0m"

    def test_under_an_hour(self):
        assert format_hm(59) == "0h 59m"

    def test_negative(self):
        assert format_hm(-61) == "-1h 1m"

    def test_large(self):
        assert format_hm(2400) == "40h 0m"


class TestOverallSummary:
    def test_no_data(self):
        assert format_overall_summary(recalculate([])) == "No rows in timesheet."

    def test_totals(self, make_row):
        summary = recalculate(
            [make_row(index=1, week="W", basic="40", ot15="1:30", ot20="0.25")]
        )
        assert format_overall_summary(summary) == (
            "Basic:   40h 0m\n"
            "OT 1.5:  1h 30m\n"
            "OT 2.0:  0h 15m\n"
            "-------------------------\n"
            "TOTAL:   41h 45m"
        )


class TestWeeklySummary:
    def test_no_data(self):
        assert format_weekly_summary(recalculate([])) == "No rows in timesheet."

    def test_block_layout(self, make_row):
        summary = recalculate([make_row(index=1, week="Week 1", basic="8")])
        assert format_weekly_summary(summary) == (
            "Week 1\n"
            "  Basic:  8h 0m\n"
            "  OT 1.5: 0h 0m\n"
            "  OT 2.0: 0h 0m\n"
            "  Total:  8h 0m\n"
        )

    def test_string_ordering_of_week_labels(self, make_row):
        """Test that "Week 10" sorts before "Week 2" (string, not numeric)."""
        summary = recalculate(
            [
                make_row(index=1, week="Week 2", basic="1"),
                make_row(index=2, week="Week 10", basic="1"),
                make_row(index=3, basic="1"),
            ]
        )
        text = format_weekly_summary(summary)
        headings = [line for line in text.splitlines() if line and not line.startswith(" ")]
        assert headings == ["Unspecified", "Week 10", "Week 2"]

    def test_blocks_separated_by_blank_line(self, make_row):
        summary = recalculate(
            [make_row(index=1, week="A", basic="1"), make_row(index=2, week="B", basic="1")]
        )
        assert "Total:  1h 0m\n\nB\n" in format_weekly_summary(summary)


class TestFormatIssues:
    def test_no_data(self):
        assert format_issues(recalculate([]).report) == "No issues detected (no data)."

    def test_clean(self, sample_rows):
        assert format_issues(recalculate(sample_rows).report) == "No issues detected."

    def test_issue_lines(self, make_row):
        summary = recalculate(
            [
                make_row(index=1, date="10/03", basic="x"),
                make_row(index=2, start="9:00", finish="8:00"),
            ]
        )
        assert format_issues(summary.report) == (
            'Row 1 (10/03): Basic hours "x" is invalid.\n'
            "Row 2: Finish time is before start time after lunch."
        )


class TestFormatIssueBreakdown:
    def test_no_issues(self, sample_rows):
        assert format_issue_breakdown(recalculate(sample_rows).report) == ""

    def test_counts_per_kind_in_first_seen_order(self, make_row):
        summary = recalculate(
            [
                make_row(index=1, start="9:00", finish="8:00", basic="x"),
                make_row(index=2, basic="y", ot15="1:99"),
            ]
        )
        assert format_issue_breakdown(summary.report) == (
            "Invalid duration format: 2\n"
            "Finish before start: 1\n"
            "Invalid time format: 1"
        )
