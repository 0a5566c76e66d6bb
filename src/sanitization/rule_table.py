"""
RuleTable: the configured set of disallowed characters.

Each rule maps one disallowed character to a display name (used in the
statistics report) and the character that replaces it in the document.

Configuration format (JSON or YAML):

    {
        "—": ["Em dash", "-"],
        "★": ["Black star", ""]
    }

An empty or missing replacement falls back to FALLBACK_MARKER.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

import yaml

from src.config import FALLBACK_MARKER, UNKNOWN_NAME
from src.logging_config import debug_log, warning
from src.sanitization.exceptions import ConfigError


@dataclass(frozen=True)
class RuleEntry:
    """
    A single character rule.

    Attributes:
        character: The disallowed character (one Unicode scalar)
        display_name: Human-readable name shown in reports
        replacement: The character substituted for it (one Unicode scalar)
    """
    character: str
    display_name: str
    replacement: str

    @property
    def codepoint(self) -> str:
        """Codepoint label, e.g. 'U+00A0'."""
        return f"U+{ord(self.character):04X}"


class RuleTable:
    """
    Immutable mapping from disallowed character to RuleEntry.

    Built once at startup and shared by reference with every component that
    needs it. Iteration follows the order of the configuration payload.
    """

    def __init__(self, entries: list[RuleEntry]):
        rules: dict[str, RuleEntry] = {}
        for entry in entries:
            if entry.character in rules:
                raise ConfigError(
                    f"Duplicate rule for {entry.character!r} ({entry.codepoint})"
                )
            rules[entry.character] = entry

        self._rules = MappingProxyType(rules)
        self._characters = frozenset(rules)
        self._names = MappingProxyType({c: e.display_name for c, e in rules.items()})
        self._replacements = MappingProxyType({c: e.replacement for c, e in rules.items()})

    @property
    def characters(self) -> frozenset[str]:
        """Set of all disallowed characters."""
        return self._characters

    @property
    def names(self) -> Mapping[str, str]:
        """Disallowed character -> display name."""
        return self._names

    @property
    def replacements(self) -> Mapping[str, str]:
        """Disallowed character -> replacement character."""
        return self._replacements

    def __getitem__(self, char: str) -> RuleEntry:
        return self._rules[char]

    def __contains__(self, char: object) -> bool:
        return char in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def entries(self) -> list[RuleEntry]:
        return list(self._rules.values())

    def __repr__(self) -> str:
        return f"RuleTable({len(self)} rules)"


def _parse_entry(key: Any, value: Any, strict_keys: bool) -> RuleEntry:
    """Turn one `key: [name, replacement]` pair into a RuleEntry."""
    if not isinstance(key, str):
        raise ConfigError(f"Rule key must be a string, got {type(key).__name__}: {key!r}")
    if len(key) == 0:
        raise ConfigError("Rule key is empty; each key must be a single character")
    if len(key) > 1:
        if strict_keys:
            raise ConfigError(
                f"Rule key {key!r} has {len(key)} characters; each key must be a single character"
            )
        warning(f"[RULES] Truncating multi-character key {key!r} to {key[0]!r}")

    if value is None:
        value = []
    if not isinstance(value, (list, tuple)):
        raise ConfigError(
            f"Rule for {key!r} must be a list [display_name, replacement], got {type(value).__name__}"
        )

    display_name = str(value[0]) if len(value) > 0 and value[0] is not None else UNKNOWN_NAME
    replacement_text = str(value[1]) if len(value) > 1 and value[1] is not None else ""
    replacement = replacement_text[0] if replacement_text else FALLBACK_MARKER

    return RuleEntry(character=key[0], display_name=display_name, replacement=replacement)


def load_rule_table(payload: Any, strict_keys: bool = True) -> RuleTable:
    """
    Build a RuleTable from an already-parsed configuration payload.

    Args:
        payload: Mapping of single-character keys to [display_name, replacement]
        strict_keys: If True (default), multi-character keys are a ConfigError.
                     If False, they are truncated to their first character.

    Returns:
        RuleTable

    Raises:
        ConfigError: If the payload is not a mapping or contains a bad entry
    """
    if not isinstance(payload, Mapping):
        raise ConfigError(
            f"Rule configuration must be a mapping of character -> [name, replacement], "
            f"got {type(payload).__name__}"
        )

    entries = [_parse_entry(key, value, strict_keys) for key, value in payload.items()]
    table = RuleTable(entries)
    debug_log(f"[RULES] Loaded {len(table)} character rules")
    return table


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict:
    """json object_pairs_hook that rejects a key seen twice in one object."""
    result = {}
    for key, value in pairs:
        if key in result:
            raise ConfigError(f"Duplicate rule key in configuration: {key!r}")
        result[key] = value
    return result


def parse_rule_text(text: str, fmt: str = "json", strict_keys: bool = True) -> RuleTable:
    """
    Parse a configuration string and build a RuleTable.

    Args:
        text: Raw configuration text
        fmt: 'json' or 'yaml'
        strict_keys: See load_rule_table

    Raises:
        ConfigError: If the text cannot be parsed or describes invalid rules
    """
    try:
        if fmt == "json":
            payload = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
        elif fmt == "yaml":
            payload = yaml.safe_load(text)
        else:
            raise ConfigError(f"Unsupported rule configuration format: {fmt}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse rule configuration: {e}") from e

    return load_rule_table(payload, strict_keys=strict_keys)


def load_rule_file(path: str | Path, strict_keys: bool = True) -> RuleTable:
    """
    Load a RuleTable from a .json, .yaml or .yml file.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid
    """
    path = Path(path)
    fmt = "yaml" if path.suffix.lower() in (".yaml", ".yml") else "json"

    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise ConfigError(f"Rule configuration not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read rule configuration {path}: {e}") from e

    debug_log(f"[RULES] Reading {fmt} rules from {path}")
    return parse_rule_text(text, fmt=fmt, strict_keys=strict_keys)
