"""
Tests for environment-driven configuration values.
"""

import importlib
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src import config


class TestEnvInt:
    """Integer settings read from the environment."""

    def test_valid_value_used(self, monkeypatch):
        monkeypatch.setenv("DOCX_CLEANER_WORKERS", "2")
        assert config._env_int("DOCX_CLEANER_WORKERS", 4) == 2

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("DOCX_CLEANER_WORKERS", raising=False)
        assert config._env_int("DOCX_CLEANER_WORKERS", 3) == 3

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("DOCX_CLEANER_WORKERS", "  ")
        assert config._env_int("DOCX_CLEANER_WORKERS", 3) == 3

    def test_non_integer_uses_default(self, monkeypatch):
        monkeypatch.setenv("DOCX_CLEANER_WORKERS", "four")
        assert config._env_int("DOCX_CLEANER_WORKERS", 3) == 3

    def test_bad_worker_count_does_not_break_import(self, monkeypatch):
        """A typo in DOCX_CLEANER_WORKERS must not stop the module loading."""
        monkeypatch.setenv("DOCX_CLEANER_WORKERS", "many")
        try:
            reloaded = importlib.reload(config)
            assert reloaded.MAX_WORKERS == min(os.cpu_count() or 4, 4)
        finally:
            monkeypatch.delenv("DOCX_CLEANER_WORKERS")
            importlib.reload(config)
