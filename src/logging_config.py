"""
Unified Logging Configuration for DocxCleaner

This module provides a centralized logging system that combines:
- Console output with timestamps (DEBUG_MODE only)
- File output to debug_flow.txt (full trace of each cleaning session)
- File output to logs/processing.log (for production)
- Performance timing via Timer context manager

All modules should import logging functions from this module:
    from src.logging_config import debug_log, info, warning, error, Timer

The module respects DEBUG_MODE from config:
- DEBUG_MODE=True: All messages shown on console, verbose timing
- DEBUG_MODE=False: Only warnings/errors shown on console

Log Levels:
- debug_log(): Always writes to file; console only in DEBUG_MODE
- info(): Standard information messages
- warning(): Warning messages (always shown)
- error(): Error messages with optional exception info
- critical(): Critical errors (always shown with traceback)
"""

import logging
import sys
import threading
import time
from datetime import datetime

from src.config import DEBUG_FLOW_FILE, DEBUG_MODE, LOG_DATE_FORMAT, LOG_FILE, LOG_FORMAT

# =============================================================================
# File Logger Setup (debug_flow.txt for debugging sessions)
# =============================================================================

class _DebugFileLogger:
    """
    Manages the debug_flow.txt file for detailed debugging output.

    The file is opened on first write so that importing the package (for
    example from the test suite) does not truncate a previous trace.
    Paragraphs may be cleaned from worker threads, so writes are serialized.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._log_file = None
            cls._instance._lock = threading.Lock()
        return cls._instance

    def _open(self):
        """Create and initialize the debug log file."""
        self._log_file = open(DEBUG_FLOW_FILE, 'w', encoding='utf-8')
        self._log_file.write("=== DocxCleaner Debug Log ===\n")
        self._log_file.write(f"Started: {datetime.now().isoformat()}\n")
        self._log_file.write(f"DEBUG_MODE: {DEBUG_MODE}\n")
        self._log_file.write("=" * 60 + "\n\n")
        self._log_file.flush()

    def write(self, message: str):
        """Write message to the debug log file."""
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        with self._lock:
            try:
                if self._log_file is None:
                    self._open()
                self._log_file.write(f"[{timestamp}] {message}\n")
                self._log_file.flush()
            except OSError:
                # Trace file is best-effort; processing.log still receives info+
                self._log_file = None

    def close(self):
        """Close the debug log file gracefully."""
        with self._lock:
            if self._log_file:
                self._log_file.write(f"\n{'=' * 60}\n")
                self._log_file.write(f"Ended: {datetime.now().isoformat()}\n")
                self._log_file.close()
                self._log_file = None


# Global debug file logger instance
_debug_file_logger = _DebugFileLogger()


# =============================================================================
# Standard Python Logging Setup
# =============================================================================

def _setup_standard_logging() -> logging.Logger:
    """
    Configure the standard Python logging framework.

    Returns:
        Configured logger instance for DocxCleaner
    """
    logger = logging.getLogger('DocxCleaner')
    logger.setLevel(logging.DEBUG if DEBUG_MODE else logging.INFO)

    # Prevent duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    try:
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)
    except OSError:
        pass  # Log directory may be read-only; console handler below still works

    if DEBUG_MODE:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(console_handler)

    return logger


_logger = _setup_standard_logging()


# =============================================================================
# Timer Context Manager
# =============================================================================

class Timer:
    """
    Context manager for timing code blocks with automatic logging.

    Usage:
        with Timer("Loading document"):
            document = load_document(path)

    Output (DEBUG_MODE=True):
        [14:32:01.120] Starting Loading document...
        [14:32:01.962] Loading document took 842 ms

    Attributes:
        operation_name: Name of the operation being timed
        duration_ms: Duration in milliseconds (available after exit)
    """

    def __init__(self, operation_name: str, auto_log: bool = True):
        self.operation_name = operation_name
        self.auto_log = auto_log
        self.start_time: float | None = None
        self.end_time: float | None = None
        self.duration_ms: float | None = None

    def __enter__(self):
        if self.auto_log:
            debug_log(f"Starting {self.operation_name}...")
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.time()
        self.duration_ms = (self.end_time - self.start_time) * 1000

        if self.auto_log:
            if self.duration_ms < 1000:
                duration_str = f"{self.duration_ms:.0f} ms"
            else:
                duration_str = f"{self.duration_ms / 1000:.1f} seconds"

            debug_log(f"{self.operation_name} took {duration_str}")

        return False  # Don't suppress exceptions

    def get_duration_ms(self) -> float:
        """
        Get the measured duration in milliseconds.

        Raises:
            ValueError: If timer has not completed yet
        """
        if self.duration_ms is None:
            raise ValueError("Timer has not been completed yet")
        return self.duration_ms


# =============================================================================
# Public Logging Functions
# =============================================================================

def debug_log(message: str):
    """
    Log a debug message to the trace file and console (if DEBUG_MODE).

    Args:
        message: The message to log (prefix with [MODULE] for clarity)

    Example:
        debug_log("[WALKER] Cleaning 42 paragraphs with 4 workers")
    """
    _debug_file_logger.write(message)

    if DEBUG_MODE:
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        formatted = f"[{timestamp}] {message}"
        try:
            print(formatted)
            sys.stdout.flush()
        except UnicodeEncodeError:
            # Windows consoles choke on the characters this tool exists to remove
            sys.stdout.buffer.write((formatted + "\n").encode('utf-8', errors='replace'))
            sys.stdout.buffer.flush()


def info(message: str):
    """Log an informational message."""
    _debug_file_logger.write(f"[INFO] {message}")
    _logger.info(message)


def warning(message: str):
    """Log a warning message."""
    _debug_file_logger.write(f"[WARNING] {message}")
    _logger.warning(message)


def error(message: str, exc_info: bool = False):
    """
    Log an error message with optional exception traceback.

    Args:
        message: The error message to log
        exc_info: If True, include exception traceback (only in DEBUG_MODE)
    """
    _debug_file_logger.write(f"[ERROR] {message}")
    _logger.error(message, exc_info=exc_info and DEBUG_MODE)


def critical(message: str, exc_info: bool = True):
    """
    Log a critical error with exception traceback.

    Args:
        message: The critical error message
        exc_info: If True, include exception traceback
    """
    _debug_file_logger.write(f"[CRITICAL] {message}")
    _logger.critical(message, exc_info=exc_info and DEBUG_MODE)


def close_debug_log():
    """Close the debug log file. Call at application shutdown."""
    _debug_file_logger.close()


__all__ = [
    'debug_log',
    'info',
    'warning',
    'error',
    'critical',
    'close_debug_log',
    'Timer',
    'DEBUG_MODE',
]
