"""
Errors raised while building or querying an automaton.
"""


class AhoCorasickError(Exception):
    """Base class for all errors raised by this package."""


class InvalidPatternError(AhoCorasickError, ValueError):
    """A pattern is empty or uses a symbol the automaton cannot store."""


class InvalidDictionaryError(AhoCorasickError, ValueError):
    """A keyword dictionary is empty or ambiguous."""


class NotBuiltError(AhoCorasickError, RuntimeError):
    """The automaton was queried before ``build()`` was called."""


class AlreadyBuiltError(AhoCorasickError, RuntimeError):
    """The automaton is frozen and cannot be modified or built again."""
