"""
One-shot search helpers that build a :class:`KeywordTrie` for a single call.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .trie import KeywordTrie, Match


def search_in_text(
    dictionary: Mapping[str, str],
    text: str,
    case_sensitive: bool = True,
    check_bounds: bool = False,
) -> list[Match]:
    """
    Search the dictionary patterns in a single text.
    :param dictionary: Mapping of pattern -> keyword.
    :param text: Text to search.
    :return: Matches in the order they are found in the text.
    """
    trie = KeywordTrie(dictionary, case_sensitive=case_sensitive, check_bounds=check_bounds)
    return trie.search(text)


def search_in_texts(
    dictionary: Mapping[str, str],
    texts: Iterable[str],
    case_sensitive: bool = True,
    check_bounds: bool = False,
    workers: int | None = None,
) -> list[list[Match]]:
    """
    Search the dictionary patterns in several texts, building the trie once.
    :return: One list of matches per text.
    """
    trie = KeywordTrie(dictionary, case_sensitive=case_sensitive, check_bounds=check_bounds)
    return trie.search_many(texts, workers=workers)
