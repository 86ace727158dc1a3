"""Locate a word file and load it into a lexicon."""

from __future__ import annotations

import logging
import os

from lexicon.constants import DEFAULT_ENCODING, DEFAULT_WORD_FILES, LOGGER_NAME
from lexicon.lexicon import Lexicon

log = logging.getLogger(LOGGER_NAME)


def candidate_paths(path: str | None = None, search_paths: list[str] | None = None) -> list[str]:
    """Word files to try, the explicit ``path`` first."""
    paths: list[str] = []
    if path:
        paths.append(path)
    paths.extend(DEFAULT_WORD_FILES if search_paths is None else search_paths)
    return paths


def load_lexicon(
    path: str | None = None,
    *,
    search_paths: list[str] | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> Lexicon:
    """Load the first candidate word file that yields any words.

    Files that are missing or unreadable are skipped. If none of the
    candidates has words an empty lexicon is returned.
    """
    for candidate in candidate_paths(path, search_paths):
        if not os.path.exists(candidate):
            continue
        try:
            lex = Lexicon.from_file(candidate, encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not read %s: %s", candidate, exc)
            continue
        if lex:
            log.info("Loaded %s words from %s", f"{len(lex):,}", candidate)
            return lex
        log.debug("No words in %s", candidate)

    if path:
        log.warning("Word file %s not found or empty.", path)
    log.warning("No word file found -- starting with an empty lexicon.")
    return Lexicon()
