from __future__ import annotations

import logging
from collections import abc
from itertools import islice
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidInput

logger = logging.getLogger(__name__)


def validate_seed(seed: Sequence[int]) -> Tuple[int, ...]:
    """
    Return the seed as a tuple, or raise InvalidInput.

    A seed needs at least two terms, all non-negative integers, in a definite
    order (list, tuple, ...; sets and other unordered iterables are rejected).
    """
    if not isinstance(seed, abc.Sequence):
        raise InvalidInput(f"seed must be an ordered sequence of integers, got {seed!r}")
    terms = tuple(seed)
    if len(terms) < 2:
        raise InvalidInput(f"seed needs at least 2 terms, got {len(terms)}")
    for x in terms:
        if isinstance(x, bool) or not isinstance(x, int):
            raise InvalidInput(f"seed terms must be integers, got {x!r}")
        if x < 0:
            raise InvalidInput(f"seed terms must be non-negative, got {x}")
    return terms


def validate_target(target: int) -> int:
    if isinstance(target, bool) or not isinstance(target, int):
        raise InvalidInput(f"target must be an integer, got {target!r}")
    if target <= 0:
        raise InvalidInput(f"target must be positive, got {target}")
    return target


class SequenceEngine:
    """
    Evaluates the van Eck recurrence one turn at a time.

    last_seen is a list indexed by value holding the most recent turn
    (1-based) at which that value was spoken, excluding the current turn.
    0 marks a value that has not been recorded.

    size_hint pre-sizes the table; pass the target when it is known.
    Seed terms at or beyond the table length live in a small overflow dict
    until the table grows to cover them. Computed values are always below
    the current turn, so only seed terms can land there.
    """

    def __init__(self, seed: Sequence[int], size_hint: int = 0):
        self._seed = validate_seed(seed)
        L = len(self._seed)

        size = max(size_hint, L)
        self._last_seen: List[int] = [0] * size
        self._overflow: Dict[int, int] = {}
        for j in range(L - 1):
            self._record(self._seed[j], j + 1)

        self._last = self._seed[-1]
        self._turn = L
        logger.debug(
            "engine seed=%s table_size=%d overflow=%d", self._seed, size, len(self._overflow)
        )

    def _record(self, value: int, turn: int) -> None:
        if value < len(self._last_seen):
            self._last_seen[value] = turn
        else:
            self._overflow[value] = turn

    def _lookup(self, value: int) -> int:
        if value < len(self._last_seen):
            return self._last_seen[value]
        return self._overflow.get(value, 0)

    @property
    def seed(self) -> Tuple[int, ...]:
        return self._seed

    @property
    def turn(self) -> int:
        """Number of turns spoken so far."""
        return self._turn

    @property
    def last_spoken(self) -> int:
        return self._last

    def last_seen(self, value: int) -> Optional[int]:
        """Recorded turn for value, or None if it has no entry."""
        if value < 0:
            return None
        return self._lookup(value) or None

    def _reserve(self, size: int) -> None:
        n = len(self._last_seen)
        if size > n:
            self._last_seen.extend([0] * (size - n))
            for value in [v for v in self._overflow if v < size]:
                self._last_seen[value] = self._overflow.pop(value)
            logger.debug("last_seen table grown %d -> %d", n, size)

    def advance(self) -> int:
        """Speak one more turn and return the new value."""
        prev = self._turn
        last = self._last
        # the new value is below prev, so prev slots always suffice
        if prev >= len(self._last_seen):
            self._reserve(2 * prev)

        p = self._lookup(last)
        spoken = prev - p if p else 0
        self._record(last, prev)

        self._last = spoken
        self._turn = prev + 1
        return spoken

    def run(self, target: int) -> int:
        """
        Advance until `target` turns have been spoken; return the value at `target`.

        Targets inside the seed return the seed term directly. Targets between
        the seed and the current turn cannot be answered without history.
        """
        validate_target(target)
        L = len(self._seed)
        if target <= L:
            return self._seed[target - 1]
        if target < self._turn:
            raise InvalidInput(
                f"target {target} precedes current turn {self._turn}; start a new engine"
            )

        self._reserve(target)
        # an oversized last seed term is the only value outside the table
        if self._last >= len(self._last_seen):
            self.advance()

        table = self._last_seen
        last = self._last

        # hot loop: same steps as advance(), with the state held in locals
        for i in range(self._turn, target):
            p = table[last]
            table[last] = i
            last = i - p if p else 0

        self._last = last
        self._turn = target
        logger.debug("reached turn %d, spoken=%d", target, last)
        return last

    def __iter__(self) -> Iterator[int]:
        """
        Yield the whole sequence from turn 1.

        Only valid on a fresh engine; computed terms advance this engine.
        """
        if self._turn != len(self._seed):
            raise InvalidInput("iteration must start from a fresh engine")
        yield from self._seed
        while True:
            yield self.advance()


def run(seed: Sequence[int], target: int) -> int:
    """Value spoken at turn `target` for the given seed."""
    validate_target(target)
    return SequenceEngine(seed, size_hint=target).run(target)


def iter_spoken(seed: Sequence[int]) -> Iterator[int]:
    """Unbounded iterator over the sequence, seed terms first."""
    return iter(SequenceEngine(seed))


def spoken_prefix(seed: Sequence[int], n: int) -> List[int]:
    """
    First n terms of the sequence:
      [S[0], ..., S[L-1], a(L+1), ..., a(n)]
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidInput(f"prefix length must be a non-negative integer, got {n!r}")
    return list(islice(SequenceEngine(seed, size_hint=n), n))
