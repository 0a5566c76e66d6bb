"""
Exceptions raised by the character-cleaning engine.
"""


class DocxCleanerError(Exception):
    """Base class for all DocxCleaner errors."""


class ConfigError(DocxCleanerError):
    """
    The character rule configuration cannot be turned into a RuleTable.

    Raised when the payload is not parseable, is not a mapping, an entry is
    malformed, or a key is empty. Fatal at startup.
    """


class UnregisteredCharacterError(DocxCleanerError, KeyError):
    """
    A counter increment was requested for a character with no rule.

    Indicates broken wiring between the RuleTable and the CounterStore,
    never bad input.
    """

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"No counter registered for {char!r} (U+{ord(char):04X})")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
