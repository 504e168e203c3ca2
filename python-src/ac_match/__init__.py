"""
Aho-Corasick algorithm for efficient multi-pattern text searches.
"""

from .automaton import Automaton, ByteAutomaton
from .exceptions import (
    AhoCorasickError,
    AlreadyBuiltError,
    InvalidDictionaryError,
    InvalidPatternError,
    NotBuiltError,
)
from .search import search_in_text, search_in_texts
from .trie import KeywordTrie, Match
from .util import match_with_aho_corasick, normalize_string, split_patterns, to_dictionary

__all__ = [
    "search_in_text",
    "search_in_texts",
    "to_dictionary",
    "normalize_string",
    "split_patterns",
    "match_with_aho_corasick",
    "Automaton",
    "ByteAutomaton",
    "KeywordTrie",
    "Match",
    "AhoCorasickError",
    "AlreadyBuiltError",
    "InvalidDictionaryError",
    "InvalidPatternError",
    "NotBuiltError",
]
