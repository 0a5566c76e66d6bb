"""
Unit tests for StatisticsReporter row building and rendering.
"""

import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.reporting import ReportRow, StatisticsReporter
from src.sanitization import load_rule_table


@pytest.fixture
def reporter():
    table = load_rule_table({
        "A": ["Letter A", "a"],
        "B": ["Letter B", "b"],
        "C": ["Letter C", "c"],
    })
    return StatisticsReporter(table)


class TestBuildRows:
    """Row selection and ordering."""

    def test_sorted_descending_and_zero_omitted(self, reporter):
        rows = reporter.build_rows([("A", 3), ("B", 5), ("C", 0)])

        assert [(row.character, row.count) for row in rows] == [("B", 5), ("A", 3)]

    def test_ties_keep_snapshot_order(self, reporter):
        rows = reporter.build_rows([("A", 2), ("B", 7), ("C", 2)])
        assert [row.character for row in rows] == ["B", "A", "C"]

    def test_empty_when_nothing_removed(self, reporter):
        assert reporter.build_rows([("A", 0), ("B", 0), ("C", 0)]) == []

    def test_unknown_character_gets_unknown_name(self, reporter):
        rows = reporter.build_rows([("Z", 1)])
        assert rows[0].display_name == "UNKNOWN"


class TestReportRow:
    """Formatting of a single row."""

    def test_codepoint_padded_to_four_digits(self):
        assert ReportRow("Letter A", "A", 1).codepoint == "U+0041"

    def test_codepoint_uppercase_hex(self):
        assert ReportRow("Em dash", "—", 1).codepoint == "U+2014"

    def test_codepoint_beyond_bmp(self):
        assert ReportRow("Grinning face", "😀", 1).codepoint == "U+1F600"

    def test_format(self):
        assert ReportRow("Em dash", "—", 3).format() == "Em dash (U+2014) - —: 3"


class TestRendering:
    """Console and dialog output share the same rows."""

    def test_render_lines(self, reporter):
        lines = reporter.render_lines([("A", 3), ("B", 5), ("C", 0)])

        assert lines == [
            "Character Removal Statistics:",
            "============================",
            "Letter B (U+0042) - B: 5",
            "Letter A (U+0041) - A: 3",
            "",
            "Total characters removed: 8",
        ]

    def test_render_lines_zero_total(self, reporter):
        lines = reporter.render_lines([("A", 0), ("B", 0), ("C", 0)])

        assert lines[-1] == "Total characters removed: 0"
        assert not any("(U+" in line for line in lines)

    def test_render_console(self, reporter):
        stream = io.StringIO()
        reporter.render_console([("A", 1)], output_path="out_cleaned.docx", stream=stream)

        output = stream.getvalue()
        assert "Letter A (U+0041) - A: 1" in output
        assert "Total characters removed: 1" in output
        assert output.rstrip().endswith("Saved as: out_cleaned.docx")

    def test_render_message(self, reporter):
        message = reporter.render_message([("A", 2), ("B", 4)], output_path="x_cleaned.docx")

        assert message.startswith("Character Removal Statistics:\n")
        assert message.index("Letter B") < message.index("Letter A")
        assert "Total characters removed: 6" in message
        assert message.endswith("Saved as: x_cleaned.docx")

    def test_console_and_message_show_same_rows(self, reporter):
        snapshot = [("A", 2), ("B", 4), ("C", 1)]
        stream = io.StringIO()
        reporter.render_console(snapshot, stream=stream)
        message = reporter.render_message(snapshot)

        for row in reporter.build_rows(snapshot):
            assert row.format() in stream.getvalue()
            assert row.format() in message
