"""CLI / interactive shell for the lexicon."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Callable, Iterable, Iterator

from lexicon.constants import LOG_FORMAT
from lexicon.errors import InvalidWordError
from lexicon.lexicon import Lexicon
from lexicon.loader import load_lexicon

HELP = """\
Commands:
  add WORD              -- add a word
  remove WORD           -- remove exactly one word
  remove-prefix PREFIX  -- remove a prefix and every word extending it
  has WORD              -- is WORD in the lexicon?
  prefix PREFIX         -- does any word start with PREFIX?
  words PREFIX          -- list the words starting with PREFIX
  list                  -- list every word
  size                  -- number of words
  clear                 -- remove every word
  done                  -- quit"""


def _prompt_lines() -> Iterator[str]:
    while True:
        try:
            yield input("  lexicon> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return


def run_shell(
    lex: Lexicon,
    lines: Iterable[str] | None = None,
    out: Callable[[str], object] = print,
) -> None:
    """Run shell commands against ``lex`` until ``done`` or end of input.

    Commands come from ``lines`` when given, otherwise from the terminal.
    """
    if lines is None:
        lines = _prompt_lines()

    for inp in lines:
        parts = inp.split()
        if not parts:
            continue
        cmd, args = parts[0].lower(), parts[1:]

        if cmd == "done":
            break
        if cmd in ("help", "?"):
            out(HELP)
            continue
        if cmd == "size":
            out(f"  {len(lex):,} word(s)")
            continue
        if cmd == "list":
            out(f"  {lex}" if lex else "  (empty)")
            continue
        if cmd == "clear":
            lex.clear()
            out("  Lexicon cleared.")
            continue

        if len(args) != 1:
            out(f"  Format: {cmd} WORD   (type 'help' for commands)")
            continue
        word = args[0]

        try:
            if cmd == "add":
                known = word in lex
                lex.add(word)
                out(f"  '{word}' already present" if known else f"  Added '{word}'")
            elif cmd == "remove":
                removed = lex.remove(word)
                out(f"  Removed '{word}'" if removed else f"  '{word}' not found")
            elif cmd == "remove-prefix":
                before = len(lex)
                if lex.remove_prefix(word):
                    out(f"  Removed {before - len(lex)} word(s) starting with '{word}'")
                else:
                    out(f"  No words start with '{word}'")
            elif cmd == "has":
                out(f"  {'yes' if lex.contains(word) else 'no'}")
            elif cmd == "prefix":
                out(f"  {'yes' if lex.contains_prefix(word) else 'no'}")
            elif cmd == "words":
                matches = lex.words_with_prefix(word)
                out(f"  {', '.join(matches)}" if matches else "  (none)")
            else:
                out(f"  Unknown command '{cmd}'   (type 'help' for commands)")
        except InvalidWordError as exc:
            out(f"  Invalid.  {exc}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Lexicon -- word and prefix lookups over a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--no-shell", action="store_true",
                        help="Load the word list, print a summary and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    t0 = time.time()
    lex = load_lexicon(args.dict)
    elapsed = time.time() - t0
    print(f"Lexicon ready: {len(lex):,} words in {elapsed:.2f}s.")

    if args.no_shell:
        return
    print()
    print(HELP)
    print()
    run_shell(lex)


if __name__ == "__main__":
    main()
