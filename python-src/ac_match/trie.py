"""
Keyword search on top of the automaton: each pattern maps to a keyword and
every occurrence is reported with its position in the text.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .automaton import Automaton
from .exceptions import InvalidDictionaryError, InvalidPatternError

log = logging.getLogger("ac_match")


@dataclass(frozen=True)
class Match:
    """
    One occurrence of a pattern in a text.
    ``to_char`` is exclusive, so ``text[from_char:to_char] == value``.
    """

    from_char: int
    to_char: int
    value: str
    kw: str


def _fold(text: str) -> str:
    # lower() may lengthen some characters; keep those unchanged so that
    # indices in the folded text are still valid in the original one
    folded = []
    for ch in text:
        low = ch.lower()
        folded.append(low if len(low) == 1 else ch)
    return "".join(folded)


def _on_word_bounds(text: str, start: int, end: int) -> bool:
    left_ok = start == 0 or not text[start - 1].isalnum()
    right_ok = end == len(text) or not text[end].isalnum()
    return left_ok and right_ok


class KeywordTrie:
    """
    Search a dictionary of patterns in texts.

    :param dictionary: Mapping of pattern -> keyword. Several patterns may map
        to the same keyword.
    :param case_sensitive: When False, patterns and texts are compared in
        lower case.
    :param check_bounds: When True, only matches that are not directly
        preceded or followed by an alphanumeric character are reported.
    """

    def __init__(
        self,
        dictionary: Mapping[str, str],
        case_sensitive: bool = True,
        check_bounds: bool = False,
    ):
        if not dictionary:
            raise InvalidDictionaryError("The dictionary must contain at least one pattern")

        self.case_sensitive = case_sensitive
        self.check_bounds = check_bounds
        self._keywords: dict[str, str] = {}
        self._automaton = Automaton()

        for pattern, keyword in dictionary.items():
            if not pattern:
                raise InvalidPatternError(f"Empty pattern for keyword {keyword!r}")
            key = self._prepare(unicodedata.normalize("NFC", pattern))
            if key in self._keywords:
                raise InvalidDictionaryError(
                    f"Pattern {pattern!r} collides with another pattern in the dictionary"
                )
            self._keywords[key] = keyword
            self._automaton.add_pattern(key)

        self._automaton.build()
        log.debug(
            "Created keyword trie with %d patterns (case_sensitive=%s, check_bounds=%s)",
            len(self._keywords),
            case_sensitive,
            check_bounds,
        )

    def _prepare(self, text: str) -> str:
        return text if self.case_sensitive else _fold(text)

    def search(self, text: str) -> list[Match]:
        """
        Find all the occurrences of the dictionary patterns in a text.
        :param text: Text to search.
        :return: Matches in the order they are found in the text.
        """
        matches = []
        for end, pattern in self._automaton.finditer(self._prepare(text)):
            start = end - len(pattern)
            if self.check_bounds and not _on_word_bounds(text, start, end):
                continue
            matches.append(Match(start, end, text[start:end], self._keywords[pattern]))
        return matches

    def search_many(self, texts: Iterable[str], workers: int | None = None) -> list[list[Match]]:
        """
        Search several texts.
        :param texts: Texts to search.
        :param workers: Number of threads to scan with; sequential when None.
        :return: One list of matches per text, in the same order as the texts.
        """
        if workers is None:
            return [self.search(text) for text in texts]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self.search, texts))

    def __len__(self) -> int:
        return len(self._keywords)
