"""
Document Cleaning Module (The "Cleaner")
Replaces disallowed characters in Word documents and reports what it removed.

Pipeline for one document:
    reset counters -> load .docx -> walk and clean every text node
    -> save <name>_cleaned.docx -> render statistics

The output file is only written after the whole document has been cleaned.

Can run standalone via command line:
    python -m src.cleaner report.docx
"""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

from src.config import DEFAULT_RULES_FILE, MAX_WORKERS
from src.document import (
    DocumentError,
    DocumentWalker,
    WalkStats,
    generate_output_path,
    load_document,
    save_document,
)
from src.logging_config import Timer, debug_log, error, info
from src.parallel import create_strategy
from src.reporting import ReportRow, StatisticsReporter
from src.sanitization import ConfigError, CounterStore, RuleTable, TextCleaner, load_rule_file


@dataclass
class CleaningResult:
    """
    Outcome of cleaning one document.

    Attributes:
        input_path: Source document
        output_path: Where the cleaned document was written
        snapshot: (char, count) pairs in rule order, zero counts included
        rows: Report rows (non-zero counts, highest first)
        walk: Traversal statistics
    """
    input_path: Path
    output_path: Path
    snapshot: list[tuple[str, int]] = field(default_factory=list)
    rows: list[ReportRow] = field(default_factory=list)
    walk: WalkStats = field(default_factory=WalkStats)

    @property
    def total_removed(self) -> int:
        return sum(row.count for row in self.rows)


class DocxCleaner:
    """
    Cleans Word documents against a RuleTable.

    One CounterStore is shared by every paragraph worker and reset at the
    start of each document, so a single instance can process several files
    one after another.
    """

    def __init__(self, rule_table: RuleTable, max_workers: int | None = MAX_WORKERS):
        """
        Args:
            rule_table: Loaded character rules
            max_workers: Paragraph worker threads; 1 cleans sequentially
        """
        self.rule_table = rule_table
        self.max_workers = max_workers
        self.counters = CounterStore(rule_table)
        self.cleaner = TextCleaner(rule_table, self.counters)
        self.reporter = StatisticsReporter(rule_table)

    def process_document(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
    ) -> CleaningResult:
        """
        Clean a single document and save the result.

        Args:
            input_path: The .docx to clean (never modified on disk)
            output_path: Destination; defaults to <stem>_cleaned.docx beside the input

        Raises:
            DocumentError: If the document cannot be read or the result cannot be written
        """
        input_path = Path(input_path)
        output_path = Path(output_path) if output_path else generate_output_path(input_path)

        if output_path.resolve() == input_path.resolve():
            raise DocumentError(f"Refusing to overwrite the input file: {input_path}")

        info(f"Processing document: {input_path.name}")
        self.counters.reset()

        with Timer(f"Loading {input_path.name}"):
            document = load_document(input_path)

        with create_strategy(self.max_workers) as strategy:
            walker = DocumentWalker(self.cleaner, strategy=strategy)
            with Timer("Cleaning document text"):
                walk_stats = walker.walk(document)

        with Timer(f"Saving {output_path.name}"):
            save_document(document, output_path)

        snapshot = self.counters.snapshot()
        rows = self.reporter.build_rows(snapshot)
        result = CleaningResult(
            input_path=input_path,
            output_path=output_path,
            snapshot=snapshot,
            rows=rows,
            walk=walk_stats,
        )
        info(
            f"Removed {result.total_removed} characters from {input_path.name}; "
            f"saved as {output_path}"
        )
        return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx-cleaner",
        description="Remove special characters from DOCX files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Clean a file, writing report_cleaned.docx next to it
  docx-cleaner report.docx

  # Use a custom rule file (JSON or YAML)
  docx-cleaner report.docx --rules my_rules.yaml

  # No arguments: pick the file in a dialog, see statistics in a dialog
  docx-cleaner

  # Debug mode (verbose logging)
  DEBUG=true docx-cleaner report.docx
        """,
    )
    parser.add_argument(
        'input',
        nargs='?',
        help='DOCX file to clean. If omitted, a file dialog is shown.',
    )
    parser.add_argument(
        '--rules',
        default=str(DEFAULT_RULES_FILE),
        help=f'Character rule file, .json or .yaml (default: {DEFAULT_RULES_FILE})',
    )
    parser.add_argument(
        '--output',
        default=None,
        help='Output path (default: <input>_cleaned.docx)',
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=MAX_WORKERS,
        help=f'Paragraph worker threads; 1 disables threading (default: {MAX_WORKERS})',
    )
    parser.add_argument(
        '--lenient-keys',
        action='store_true',
        help='Truncate multi-character rule keys to their first character instead of failing',
    )
    return parser


def _report_failure(title: str, message: str, gui_mode: bool) -> int:
    error(message)
    if gui_mode:
        from src.ui import dialogs
        dialogs.show_error(title, message)
    else:
        print(f"Error: {message}", file=sys.stderr)
    return 1


def run(args: argparse.Namespace) -> int:
    """
    Execute a parsed command line.

    Returns:
        Process exit status (0 on success, 1 on any reported failure)
    """
    gui_mode = args.input is None

    try:
        rule_table = load_rule_file(args.rules, strict_keys=not args.lenient_keys)
    except ConfigError as e:
        return _report_failure("Configuration Error", str(e), gui_mode)

    if gui_mode:
        from src.ui import dialogs
        input_path = dialogs.pick_docx_file()
        if input_path is None:
            error("No file selected")
            print("No file selected", file=sys.stderr)
            return 1
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            return _report_failure("File Not Found", f"File '{input_path}' does not exist.", gui_mode)

    debug_log(f"[CLI] mode={'gui' if gui_mode else 'console'} rules={args.rules} workers={args.workers}")
    cleaner = DocxCleaner(rule_table, max_workers=args.workers)

    try:
        result = cleaner.process_document(input_path, args.output)
    except DocumentError as e:
        return _report_failure("Processing Error", str(e), gui_mode)

    if gui_mode:
        from src.ui import dialogs
        dialogs.show_statistics(cleaner.reporter.render_message(result.snapshot, result.output_path))
    else:
        cleaner.reporter.render_console(result.snapshot, result.output_path)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for the cleaner."""
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
