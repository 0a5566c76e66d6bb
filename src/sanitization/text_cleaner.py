"""
TextCleaner: per-fragment character substitution and space collapsing.

Two stages, applied to every run of text in the document:
1. Substitution - each disallowed character is replaced by its configured
   replacement and counted. Single pass: replacements are never re-scanned.
2. Space collapsing - every run of 2+ ASCII spaces (U+0020) becomes one.
   Other whitespace is only affected through stage 1.

Because substitution runs first, a character replaced by a space next to an
existing space is collapsed too. A rule mapping a character to a space can
therefore shorten the text by more than the substitution alone would.
"""

import re
from collections import Counter
from dataclasses import dataclass

from src.logging_config import debug_log
from src.sanitization.counter_store import CounterStore
from src.sanitization.rule_table import RuleTable

SPACE_RUN_PATTERN = re.compile(r"[ ]{2,}")


@dataclass
class FragmentResult:
    """
    Result of cleaning one text fragment.

    Attributes:
        text: The substituted and collapsed text
        replaced: Number of disallowed characters replaced
        space_runs_collapsed: Number of multi-space runs collapsed
    """
    text: str
    replaced: int = 0
    space_runs_collapsed: int = 0


class TextCleaner:
    """
    Replace disallowed characters in text fragments.

    The RuleTable and CounterStore are injected so that several cleaners
    (or several threads using one cleaner) can share the same counts.
    """

    def __init__(self, rule_table: RuleTable, counters: CounterStore):
        self.rule_table = rule_table
        self.counters = counters
        self._replacements = rule_table.replacements

    def clean(self, fragment: str) -> str:
        """Return `fragment` with disallowed characters replaced and spaces collapsed."""
        return self.clean_fragment(fragment).text

    def clean_fragment(self, fragment: str) -> FragmentResult:
        """
        Clean a fragment and report what changed.

        Counters are incremented once per disallowed character found.

        Args:
            fragment: Text content of a single run

        Returns:
            FragmentResult with the cleaned text and per-fragment counts
        """
        if not fragment:
            return FragmentResult(text="")

        substituted, found = self._substitute(fragment)
        for char, count in found.items():
            self.counters.increment(char, count)

        space_runs = len(SPACE_RUN_PATTERN.findall(substituted))
        if space_runs:
            debug_log(
                f"[CLEANER] Replaced {space_runs} stretch(es) of multiple spaces in {substituted!r}"
            )
            collapsed = SPACE_RUN_PATTERN.sub(" ", substituted)
        else:
            collapsed = substituted

        return FragmentResult(
            text=collapsed,
            replaced=sum(found.values()),
            space_runs_collapsed=space_runs,
        )

    def _substitute(self, fragment: str) -> tuple[str, Counter]:
        """Stage 1: map disallowed characters, counting each one."""
        replacements = self._replacements
        found: Counter = Counter()
        cleaned = []

        for char in fragment:
            replacement = replacements.get(char)
            if replacement is None:
                cleaned.append(char)
            else:
                found[char] += 1
                cleaned.append(replacement)

        return ''.join(cleaned), found
