"""Command line search: ``python -m ac_match "cat|dog" "the cat scaty on the dog"``."""

from __future__ import annotations

import argparse
import logging
import sys

from .automaton import Automaton
from .exceptions import AhoCorasickError
from .trie import KeywordTrie
from .util import split_patterns, to_dictionary

log = logging.getLogger("ac_match")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ac-match",
        description="Find every occurrence of a set of patterns in a text.",
    )
    parser.add_argument(
        "patterns",
        help="patterns separated by '|' and/or whitespace; repeated patterns are reported once",
    )
    parser.add_argument("text", help="text to search, or '-' to read standard input")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="case-insensitive matching")
    parser.add_argument(
        "-w", "--word-bounds", action="store_true", help="only report matches on word boundaries"
    )
    parser.add_argument(
        "-p", "--positions", action="store_true", help="print start and end offsets of each match"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not split_patterns(args.patterns):
        print("ac-match: no patterns given", file=sys.stderr)
        return 2

    text = sys.stdin.read() if args.text == "-" else args.text

    try:
        if args.positions or args.ignore_case or args.word_bounds:
            trie = KeywordTrie(
                to_dictionary(split_patterns(args.patterns)),
                case_sensitive=not args.ignore_case,
                check_bounds=args.word_bounds,
            )
            matches = trie.search(text)
            for m in matches:
                if args.positions:
                    print(f"{m.from_char}\t{m.to_char}\t{m.value}")
                else:
                    print(m.kw)
        else:
            automaton = Automaton()
            for pattern in to_dictionary(split_patterns(args.patterns)):
                automaton.add_pattern(pattern)
            automaton.build()
            matches = automaton.match(text)
            for pattern in matches:
                print(pattern)
    except AhoCorasickError as exc:
        print(f"ac-match: {exc}", file=sys.stderr)
        return 2

    log.debug("Found %d matches", len(matches))
    return 0 if matches else 1


if __name__ == "__main__":
    sys.exit(main())
