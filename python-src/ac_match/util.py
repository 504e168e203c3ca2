import re
import unicodedata

from .automaton import Automaton

_SEPARATORS = re.compile(r"[|\s]+")
_WHITESPACE = re.compile(r"\s+")


def to_dictionary(words: list[str]) -> dict[str, str]:
    """
    Convert a list of words / patterns into a dictionary to use in search. The
    keywords in this case will be the same as the patterns.
    :param words: List of strings to find in text.
    :return: mapping of word -> word after deduplicating.
    """
    clean = list(dict.fromkeys(words))
    return dict(zip(clean, clean))


def normalize_string(text: str) -> str:
    """
    Normalize a text before searching: NFC unicode normalization, whitespace
    runs collapsed to a single space and surrounding whitespace removed.
    """
    text = unicodedata.normalize("NFC", text)
    return _WHITESPACE.sub(" ", text).strip()


def split_patterns(spec: str) -> list[str]:
    """
    Split a pattern specification such as ``"cat|dog"`` on pipes and
    whitespace, dropping empty tokens.
    """
    return [token for token in _SEPARATORS.split(spec) if token]


def match_with_aho_corasick(pattern_spec: str, text: str) -> list[str]:
    """
    Find all the occurrences of the patterns in ``pattern_spec`` in a text.
    :param pattern_spec: Patterns separated by pipes and / or whitespace.
    :param text: Text to scan.
    :return: Matched patterns, one per occurrence, in scan order.
    """
    automaton = Automaton()
    for pattern in split_patterns(pattern_spec):
        automaton.add_pattern(pattern)
    automaton.build()
    return automaton.match(text)
