"""
errors.py — Error taxonomy for wordsieve.

ArgumentError and DictionaryError are user-facing: the CLI reports them
on one line and exits 1. ProgrammerError marks a bug and is never caught.
"""


class WordsieveError(Exception):
    """Base class for all wordsieve errors."""


class ArgumentError(WordsieveError, ValueError):
    """Malformed or conflicting flags or puzzle specification."""


class DictionaryError(WordsieveError, OSError):
    """The dictionary could not be opened or read."""


class ProgrammerError(WordsieveError):
    """An internal invariant was violated."""


class UnscorableLetterError(ProgrammerError, KeyError):
    """The scorer was handed a letter that has no score."""

    def __init__(self, letter: str):
        super().__init__(letter)
        self.letter = letter

    def __str__(self) -> str:
        return f"no score for letter {self.letter!r}"
