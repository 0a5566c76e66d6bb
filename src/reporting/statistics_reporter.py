"""
StatisticsReporter: turn a CounterStore snapshot into a removal report.

The same rows are rendered two ways:
- render_console(): lines written to a text stream (CLI mode)
- render_message(): one composed string for a message dialog (GUI mode)

Report layout:

    Character Removal Statistics:
    ============================
    Right single quotation mark (U+2019) - ’: 12
    Em dash (U+2014) - —: 3

    Total characters removed: 15
    Saved as: report_cleaned.docx
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

from src.config import UNKNOWN_NAME
from src.sanitization.rule_table import RuleTable

REPORT_TITLE = "Character Removal Statistics:"
REPORT_UNDERLINE = "=" * 28


@dataclass(frozen=True)
class ReportRow:
    """One line of the report."""
    display_name: str
    character: str
    count: int

    @property
    def codepoint(self) -> str:
        return f"U+{ord(self.character):04X}"

    def format(self) -> str:
        return f"{self.display_name} ({self.codepoint}) - {self.character}: {self.count}"


class StatisticsReporter:
    """
    Render per-character counts, highest first.

    Args:
        rule_table: Supplies display names for each character
    """

    def __init__(self, rule_table: RuleTable):
        self.rule_table = rule_table

    def build_rows(self, snapshot: Iterable[tuple[str, int]]) -> list[ReportRow]:
        """
        Rows for every character with a non-zero count, sorted by count
        descending. Equal counts keep their snapshot order.
        """
        names = self.rule_table.names
        rows = [
            ReportRow(display_name=names.get(char, UNKNOWN_NAME), character=char, count=count)
            for char, count in snapshot
            if count > 0
        ]
        rows.sort(key=lambda row: row.count, reverse=True)
        return rows

    def render_lines(self, snapshot: Iterable[tuple[str, int]]) -> list[str]:
        rows = self.build_rows(snapshot)
        total = sum(row.count for row in rows)

        lines = [REPORT_TITLE, REPORT_UNDERLINE]
        lines.extend(row.format() for row in rows)
        lines.append("")
        lines.append(f"Total characters removed: {total}")
        return lines

    def render_console(
        self,
        snapshot: Iterable[tuple[str, int]],
        output_path: str | Path | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Write the report to `stream` (stdout by default)."""
        stream = stream or sys.stdout
        lines = [""] + self.render_lines(snapshot)
        if output_path is not None:
            lines.append(f"Saved as: {output_path}")
        for line in lines:
            print(line, file=stream)

    def render_message(
        self,
        snapshot: Iterable[tuple[str, int]],
        output_path: str | Path | None = None,
    ) -> str:
        """Compose the report into a single string for a dialog."""
        lines = self.render_lines(snapshot)
        # Blank line between the underline and the rows reads better in a dialog
        lines.insert(2, "")
        if output_path is not None:
            lines.append(f"Saved as: {output_path}")
        return "\n".join(lines)
