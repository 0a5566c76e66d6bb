"""
Character sanitization engine for Word documents.

Components:
    RuleTable    - configured disallowed characters and their replacements
    CounterStore - thread-safe per-character removal counts
    TextCleaner  - substitutes characters in one fragment, collapses spaces
"""

from .counter_store import CounterStore
from .exceptions import ConfigError, DocxCleanerError, UnregisteredCharacterError
from .rule_table import RuleEntry, RuleTable, load_rule_file, load_rule_table, parse_rule_text
from .text_cleaner import FragmentResult, TextCleaner

__all__ = [
    "ConfigError",
    "CounterStore",
    "DocxCleanerError",
    "FragmentResult",
    "RuleEntry",
    "RuleTable",
    "TextCleaner",
    "UnregisteredCharacterError",
    "load_rule_file",
    "load_rule_table",
    "parse_rule_text",
]
