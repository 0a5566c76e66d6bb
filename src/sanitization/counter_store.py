"""
CounterStore: thread-safe per-character removal counts.

The key set is fixed at construction to the RuleTable's characters. Only the
counts change; reset() zeroes them before each document pass.
"""

import threading
from typing import Iterable

from src.sanitization.exceptions import UnregisteredCharacterError


class CounterStore:
    """
    Counts how many times each disallowed character was replaced.

    Increments may come from several worker threads at once (one per
    paragraph), so every read and write goes through a single lock.

    Example:
        counters = CounterStore(rule_table.characters)
        counters.increment("\\u00a0")
        counters.snapshot()  # [("\\u00a0", 1), ...]
    """

    def __init__(self, characters: Iterable[str]):
        """
        Args:
            characters: Characters to register, in reporting order.
                        Pass a RuleTable to keep configuration order.
        """
        self._counts: dict[str, int] = {char: 0 for char in characters}
        self._lock = threading.Lock()

    def reset(self) -> None:
        """Zero every counter. Call once per document before cleaning."""
        with self._lock:
            for char in self._counts:
                self._counts[char] = 0

    def increment(self, char: str, amount: int = 1) -> None:
        """
        Atomically add `amount` to the counter for `char`.

        Raises:
            UnregisteredCharacterError: If `char` has no counter
        """
        with self._lock:
            if char not in self._counts:
                raise UnregisteredCharacterError(char)
            self._counts[char] += amount

    def get(self, char: str) -> int:
        with self._lock:
            if char not in self._counts:
                raise UnregisteredCharacterError(char)
            return self._counts[char]

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def snapshot(self) -> list[tuple[str, int]]:
        """Return (char, count) pairs in registration order."""
        with self._lock:
            return list(self._counts.items())

    def __contains__(self, char: object) -> bool:
        return char in self._counts

    def __len__(self) -> int:
        return len(self._counts)
