"""
DocxCleaner - Main Application Entry Point

Wraps the cleaner CLI in a top-level error boundary: any unexpected
exception is written to error.log, logged, shown in a "Fatal Error" dialog
when running without a console, and turned into exit status 1.
"""

import os
import sys
import traceback
from datetime import datetime

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.cleaner import build_parser, run
from src.config import ERROR_LOG_FILE
from src.logging_config import close_debug_log, critical, warning


def format_fatal_error(exc: BaseException) -> str:
    """Describe an exception with the location it was raised from."""
    frames = traceback.extract_tb(exc.__traceback__)
    if frames:
        last = frames[-1]
        location = f"{last.filename}:{last.lineno}"
    else:
        location = "unknown location"
    return f"Fatal error at {location}:\n\n{type(exc).__name__}: {exc}"


def write_error_log(message: str, details: str = "") -> None:
    """Append a crash record to ERROR_LOG_FILE."""
    timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    try:
        with open(ERROR_LOG_FILE, 'a', encoding='utf-8') as f:
            f.write(f"[{timestamp}] {message}\n")
            if details:
                f.write(details)
            f.write("\n")
    except OSError as e:
        warning(f"Could not write crash record to {ERROR_LOG_FILE}: {e}")


def handle_fatal_error(exc: BaseException, gui_mode: bool) -> int:
    """
    Report an exception that escaped the cleaner.

    Returns:
        Exit status 1
    """
    message = format_fatal_error(exc)
    details = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    print(message, file=sys.stderr)
    write_error_log(message, details)
    critical(message)

    if gui_mode:
        import tkinter

        from src.ui import dialogs
        try:
            dialogs.show_error("Fatal Error", message)
        except tkinter.TclError as e:
            # No display available; the message is already on stderr and in error.log
            warning(f"Could not show error dialog: {e}")

    return 1


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for DocxCleaner.

    With a file argument the run is console-only; without one, dialogs are
    used for file selection, statistics and errors.
    """
    args = build_parser().parse_args(argv)
    gui_mode = args.input is None

    try:
        return run(args)
    except Exception as e:
        return handle_fatal_error(e, gui_mode)
    finally:
        close_debug_log()


if __name__ == "__main__":
    sys.exit(main())
