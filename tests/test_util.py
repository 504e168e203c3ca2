import pytest
from ac_match import match_with_aho_corasick, normalize_string, split_patterns, to_dictionary


def test_to_dictionary():
    """
    Test that words are deduplicated, keeping their first appearance order.
    """
    assert to_dictionary(["b", "a", "b", "c"]) == {"b": "b", "a": "a", "c": "c"}
    assert list(to_dictionary(["b", "a", "b"])) == ["b", "a"]
    assert to_dictionary([]) == {}


def test_normalize_string():
    """
    Test unicode composition and whitespace collapsing.
    """
    assert normalize_string("  café \t au\n\nlait ") == "café au lait"
    assert normalize_string("") == ""


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("cat|dog", ["cat", "dog"]),
        ("cat dog", ["cat", "dog"]),
        ("|cat||  dog |", ["cat", "dog"]),
        ("  ", []),
    ],
)
def test_split_patterns(spec, expected):
    """
    Test splitting a pattern specification on pipes and whitespace.
    """
    assert split_patterns(spec) == expected


def test_match_with_aho_corasick():
    """
    Test the one-call helper that splits, builds and matches.
    """
    assert match_with_aho_corasick("cat|dog", "the cat scaty on the dog") == ["cat", "cat", "dog"]
    assert match_with_aho_corasick("he she|hers", "ushers") == ["she", "he", "hers"]
    assert match_with_aho_corasick("", "anything") == []
