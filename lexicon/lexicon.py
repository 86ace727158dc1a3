"""Word list with trie-backed word and prefix search."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from itertools import takewhile
from typing import TextIO

from sortedcontainers import SortedSet

from lexicon.constants import DEFAULT_ENCODING, LOGGER_NAME
from lexicon.errors import InvalidWordError
from lexicon.trie import (
    TrieNode,
    ensure_path,
    iter_nodes,
    iter_subtree_words,
    trace_path,
    walk,
)

log = logging.getLogger(LOGGER_NAME)


class Lexicon:
    """A word list supporting fast lookup of words and prefixes.

    Words live in a prefix trie, and a sorted index of the same words is
    kept alongside it for counting and ordered enumeration. Every mutating
    method updates both before returning.

    The empty string is not a valid word: ``add``, ``remove`` and
    ``remove_prefix`` raise :class:`InvalidWordError` for it.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self._root: TrieNode | None = None
        self._size = 0
        self._words: SortedSet = SortedSet()
        if words is not None:
            self.add_words(words)

    @classmethod
    def from_stream(cls, stream: TextIO) -> Lexicon:
        """Lexicon holding one word per line of ``stream``."""
        lex = cls()
        lex.add_words_from_stream(stream)
        return lex

    @classmethod
    def from_file(cls, path: str, encoding: str = DEFAULT_ENCODING) -> Lexicon:
        """Lexicon holding one word per line of the file at ``path``."""
        lex = cls()
        lex.add_words_from_file(path, encoding=encoding)
        return lex

    # insertion

    def add(self, word: str) -> None:
        """Add ``word``. Adding a word that is already present does nothing."""
        _check_word(word)
        if self._root is None:
            self._root = TrieNode()
        node = ensure_path(self._root, word)
        if node.is_word:
            return
        node.is_word = True
        self._words.add(word)
        self._size += 1

    def add_words(self, lines: Iterable[str]) -> int:
        """Add one word per line, skipping blank lines.

        Surrounding whitespace (including the line ending) is stripped.
        Returns the number of words that were not already present.
        """
        before = self._size
        for line in lines:
            word = line.strip()
            if word:
                self.add(word)
        return self._size - before

    def add_words_from_stream(self, stream: TextIO) -> int:
        return self.add_words(stream)

    def add_words_from_file(self, path: str, encoding: str = DEFAULT_ENCODING) -> int:
        """Add the words of a one-word-per-line file. Errors opening the
        file propagate to the caller."""
        log.debug("Reading words from %s", path)
        with open(path, "r", encoding=encoding) as f:
            return self.add_words_from_stream(f)

    # queries

    def contains(self, word: str) -> bool:
        node = walk(self._root, word)
        return node is not None and node.is_word

    def contains_prefix(self, prefix: str) -> bool:
        """True if at least one stored word starts with ``prefix``."""
        return walk(self._root, prefix) is not None

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Stored words starting with ``prefix``, in sorted order."""
        if not self.contains_prefix(prefix):
            return []
        candidates = self._words.irange(minimum=prefix)
        return list(takewhile(lambda w: w.startswith(prefix), candidates))

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def node_count(self) -> int:
        """Number of trie nodes currently allocated, root included."""
        return sum(1 for _ in iter_nodes(self._root))

    # removal

    def remove(self, word: str) -> bool:
        """Remove exactly ``word``.

        Returns True if the word was stored. Words that extend ``word`` are
        kept; in that case only the word flag on its node is cleared.
        """
        return self._remove(word, subtree=False)

    def remove_prefix(self, prefix: str) -> bool:
        """Remove ``prefix`` (if it is a word) and every word extending it.

        Returns True if at least one word was removed.
        """
        return self._remove(prefix, subtree=True)

    def _remove(self, word: str, subtree: bool) -> bool:
        _check_word(word)
        edges = trace_path(self._root, word)
        if edges is None:
            return False

        parent, ch = edges[-1]
        node = parent.children[ch]
        if subtree:
            removed = self._discard_subtree(node, word)
            del parent.children[ch]
            log.debug("Removed %d word(s) under prefix %r", removed, word)
        else:
            if not node.is_word:
                return False
            self._discard(word)
            if node.children:
                node.is_word = False
            else:
                del parent.children[ch]

        # prune ancestors left with neither a word nor children
        for parent, ch in reversed(edges[:-1]):
            if not parent.children[ch].is_dead():
                break
            del parent.children[ch]
        if self._root is not None and self._root.is_dead():
            self._root = None
        return True

    def _discard(self, word: str) -> None:
        self._words.remove(word)
        self._size -= 1

    def _discard_subtree(self, node: TrieNode, prefix: str) -> int:
        """Drop every word at or below ``node`` from the index. The nodes
        themselves go away once the caller unlinks ``node``."""
        removed = 0
        for word in iter_subtree_words(node, prefix):
            self._discard(word)
            removed += 1
        return removed

    def clear(self) -> None:
        """Remove every word."""
        self._root = None
        self._words.clear()
        self._size = 0

    # export

    def map_all(self, visit: Callable[[str], object]) -> None:
        """Call ``visit`` on every word in sorted order.

        ``visit`` must not add or remove words from this lexicon; doing so
        while the walk is in progress has undefined results.
        """
        for word in self._words:
            visit(word)

    def to_set(self) -> SortedSet:
        """Sorted copy of all words."""
        return self._words.copy()

    def to_list(self) -> list[str]:
        """All words in sorted order."""
        return list(self._words)

    def to_string(self) -> str:
        return ", ".join(f"{{{word}}}" for word in self._words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Lexicon(size={self._size})"


def _check_word(word: str) -> None:
    if not isinstance(word, str):
        raise TypeError(f"words must be str, not {type(word).__name__}")
    if not word:
        raise InvalidWordError(word)
