"""Configuration constants for the lexicon package."""

import os

LOGGER_NAME = "lexicon"
LOG_FORMAT = "[%(levelname)s] %(message)s"

DEFAULT_ENCODING = "utf-8"

# Word files tried in order when no explicit path is given
DEFAULT_WORD_FILES: list[str] = [
    "words.txt",
    "dictionary.txt",
    "lexicon.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]
