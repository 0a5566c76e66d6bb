"""
Tests for the unified logging helpers.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.logging_config import Timer, debug_log, info


class TestTimer:
    """Timer context manager."""

    def test_records_duration(self):
        with Timer("noop") as timer:
            pass
        assert timer.get_duration_ms() >= 0

    def test_duration_unavailable_before_exit(self):
        timer = Timer("pending", auto_log=False)
        with pytest.raises(ValueError):
            timer.get_duration_ms()

    def test_does_not_suppress_exceptions(self):
        with pytest.raises(RuntimeError):
            with Timer("failing"):
                raise RuntimeError("fail")


class TestLogFunctions:
    """Log helpers accept characters the cleaner removes."""

    def test_debug_log_accepts_unicode(self):
        debug_log("[TEST] replaced ★ and — in 'café'")

    def test_info_accepts_unicode(self):
        info("Removed 3 × ✗")


class TestPublicNames:
    """Everything listed in __all__ is defined."""

    def test_all_names_exist(self):
        import src.logging_config as logging_config

        for name in logging_config.__all__:
            assert hasattr(logging_config, name), name
