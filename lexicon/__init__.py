"""Lexicon -- trie-backed word list."""

from lexicon.errors import InvalidWordError, LexiconError
from lexicon.lexicon import Lexicon
from lexicon.loader import load_lexicon
from lexicon.trie import TrieNode

__all__ = [
    "InvalidWordError",
    "Lexicon",
    "LexiconError",
    "TrieNode",
    "load_lexicon",
]
