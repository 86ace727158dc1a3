"""Exceptions raised by the lexicon."""

from __future__ import annotations


class LexiconError(Exception):
    """Base class for lexicon errors."""


class InvalidWordError(LexiconError, ValueError):
    """A word the lexicon cannot store or remove (e.g. the empty string)."""

    def __init__(self, word: str, reason: str = "empty words are not allowed"):
        super().__init__(f"invalid word {word!r}: {reason}")
        self.word = word
        self.reason = reason
