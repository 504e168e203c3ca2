"""
Aho-Corasick automaton: trie construction, failure links and the matching scan.

States are integer ids into tables owned by the automaton, with state ``0`` as
the root. Failure links are stored as state ids too, so they never own the
state they point to.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any

from .exceptions import AlreadyBuiltError, InvalidPatternError, NotBuiltError

log = logging.getLogger("ac_match")

ROOT = 0


class Automaton:
    """
    Multi-pattern exact matcher over sequences of hashable symbols.

    Patterns are added with :meth:`add_pattern`, then :meth:`build` computes the
    failure links once and freezes the automaton. After that :meth:`match` and
    :meth:`finditer` may be called any number of times, from any number of
    threads, since scanning never mutates the automaton.

    The same pattern added twice is reported twice per occurrence.
    """

    def __init__(self) -> None:
        self._transitions: list[Any] = []
        self._terminal: list[bool] = []
        self._outputs: list[list[int]] = []
        self._fallback: list[int] = []
        self._patterns: list[Sequence[Hashable]] = []
        self._built = False
        self._new_state()

    def _new_table(self) -> Any:
        return {}

    def _key(self, symbol: Hashable) -> Hashable:
        return symbol

    def _child(self, state: int, key: Hashable) -> int | None:
        return self._transitions[state].get(key)

    def _edges(self, state: int) -> Iterable[tuple[Hashable, int]]:
        return self._transitions[state].items()

    def _new_state(self) -> int:
        self._transitions.append(self._new_table())
        self._terminal.append(False)
        self._outputs.append([])
        self._fallback.append(ROOT)
        return len(self._transitions) - 1

    def add_pattern(self, pattern: Sequence[Hashable]) -> None:
        """
        Insert a pattern into the trie.
        :param pattern: Non-empty string (or other sequence of symbols).
        :raises InvalidPatternError: if the pattern is empty.
        :raises AlreadyBuiltError: if :meth:`build` has already run.
        """
        if self._built:
            raise AlreadyBuiltError("Cannot add patterns after build()")
        if len(pattern) == 0:
            raise InvalidPatternError("Patterns must not be empty")

        keys = [self._key(symbol) for symbol in pattern]
        state = ROOT
        for key in keys:
            child = self._child(state, key)
            if child is None:
                child = self._new_state()
                self._transitions[state][key] = child
            state = child

        self._terminal[state] = True
        self._outputs[state].append(len(self._patterns))
        self._patterns.append(pattern)

    def build(self) -> None:
        """
        Compute failure links and merged output sets, then freeze the automaton.
        States are visited breadth-first so that the failure link of a parent
        is always final before its children are processed.
        :raises AlreadyBuiltError: if called more than once.
        """
        if self._built:
            raise AlreadyBuiltError("build() has already been called")

        queue: deque[int] = deque()
        for _, child in self._edges(ROOT):
            self._fallback[child] = ROOT
            queue.append(child)

        while queue:
            state = queue.popleft()
            for key, child in self._edges(state):
                queue.append(child)

                candidate = self._fallback[state]
                while candidate != ROOT and self._child(candidate, key) is None:
                    candidate = self._fallback[candidate]
                target = self._child(candidate, key)
                fallback = ROOT if target is None else target

                self._fallback[child] = fallback
                self._outputs[child] = self._outputs[child] + self._outputs[fallback]

        self._built = True
        log.debug(
            "Built automaton with %d patterns and %d states",
            len(self._patterns),
            len(self._transitions),
        )

    def finditer(self, text: Iterable[Hashable]) -> Iterator[tuple[int, Sequence[Hashable]]]:
        """
        Lazily scan the text, yielding ``(end, pattern)`` for each occurrence,
        where ``end`` is the exclusive end index of the occurrence in the text.
        :raises NotBuiltError: if :meth:`build` has not run yet.
        """
        if not self._built:
            raise NotBuiltError("Call build() before matching")
        return self._scan(text)

    def _scan(self, text: Iterable[Hashable]) -> Iterator[tuple[int, Sequence[Hashable]]]:
        transitions = self._transitions
        fallback = self._fallback
        outputs = self._outputs
        patterns = self._patterns

        state = ROOT
        for index, symbol in enumerate(text):
            while state != ROOT and symbol not in transitions[state]:
                state = fallback[state]
            state = transitions[state].get(symbol, ROOT)
            for pattern_id in outputs[state]:
                yield index + 1, patterns[pattern_id]

    def match(self, text: Iterable[Hashable]) -> list[Sequence[Hashable]]:
        """
        Find all the pattern occurrences in a text.
        :param text: Text to scan; may be empty.
        :return: Matched patterns, one entry per occurrence, in scan order.
        """
        return [pattern for _, pattern in self.finditer(text)]

    def patterns(self) -> list[Sequence[Hashable]]:
        return list(self._patterns)

    @property
    def pattern_count(self) -> int:
        return len(self._patterns)

    @property
    def state_count(self) -> int:
        return len(self._transitions)

    @property
    def is_built(self) -> bool:
        return self._built

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return "%s(patterns=%d, states=%d, built=%s)" % (
            type(self).__name__,
            len(self._patterns),
            len(self._transitions),
            self._built,
        )


class ByteAutomaton(Automaton):
    """
    Automaton over a small fixed alphabet (bytes or code points below
    ``alphabet_size``), with array transitions instead of dictionaries.

    :meth:`build` also precomputes the complete transition function, so the
    scan follows exactly one table entry per symbol. Text symbols outside the
    alphabet reset the scan to the root.
    """

    def __init__(self, alphabet_size: int = 256) -> None:
        if alphabet_size <= 0:
            raise ValueError("alphabet_size must be positive")
        self.alphabet_size = alphabet_size
        self._delta: list[list[int]] = []
        super().__init__()

    def _new_table(self) -> list[int | None]:
        return [None] * self.alphabet_size

    def _key(self, symbol: Hashable) -> int:
        if isinstance(symbol, int):
            code = symbol
        elif isinstance(symbol, str) and len(symbol) == 1:
            code = ord(symbol)
        else:
            raise InvalidPatternError(f"Unsupported symbol {symbol!r}")
        if not 0 <= code < self.alphabet_size:
            raise InvalidPatternError(
                f"Symbol {symbol!r} is outside the alphabet of size {self.alphabet_size}"
            )
        return code

    def _child(self, state: int, key: int) -> int | None:
        return self._transitions[state][key]

    def _edges(self, state: int) -> Iterator[tuple[int, int]]:
        for code, child in enumerate(self._transitions[state]):
            if child is not None:
                yield code, child

    def build(self) -> None:
        super().build()

        delta: list[list[int]] = [[] for _ in self._transitions]
        delta[ROOT] = [ROOT if child is None else child for child in self._transitions[ROOT]]

        queue = deque(child for _, child in self._edges(ROOT))
        while queue:
            state = queue.popleft()
            inherited = delta[self._fallback[state]]
            delta[state] = [
                inherited[code] if child is None else child
                for code, child in enumerate(self._transitions[state])
            ]
            queue.extend(child for _, child in self._edges(state))

        self._delta = delta

    def _scan(self, text: Iterable[Hashable]) -> Iterator[tuple[int, Sequence[Hashable]]]:
        delta = self._delta
        outputs = self._outputs
        patterns = self._patterns
        size = self.alphabet_size

        state = ROOT
        for index, symbol in enumerate(text):
            if isinstance(symbol, int):
                code = symbol
            elif isinstance(symbol, str) and len(symbol) == 1:
                code = ord(symbol)
            else:
                code = -1
            state = delta[state][code] if 0 <= code < size else ROOT
            for pattern_id in outputs[state]:
                yield index + 1, patterns[pattern_id]
