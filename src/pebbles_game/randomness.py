# Area: Core
"""
pebbles_game.randomness - Randomness sources
============================================

The only nondeterministic input of the game. Sources are injected into
the dispatcher and the state machine so games can be replayed with a
fixed seed or a scripted sequence.

Usage:
    from pebbles_game.randomness import SystemRandomSource, draw_u32

    value = draw_u32(SystemRandomSource())
"""

from __future__ import annotations
import logging
import random
import secrets
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .errors import EntropyError

logger = logging.getLogger("pebbles_game.randomness")

U32_MAX = 2**32 - 1


class RandomnessSource(ABC):
    """Supplies uniformly-distributed 32-bit unsigned integers on demand."""

    @abstractmethod
    def next_u32(self) -> int:
        """Return an integer in [0, 2**32)."""
        pass


class SystemRandomSource(RandomnessSource):
    """Draws from the operating system's entropy pool."""

    def next_u32(self) -> int:
        return secrets.randbits(32)


class SeededRandomSource(RandomnessSource):
    """Reproducible source backed by random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_u32(self) -> int:
        return self._rng.getrandbits(32)


class ConstantRandomSource(RandomnessSource):
    """Always returns the same value."""

    def __init__(self, value: int):
        self.value = value

    def next_u32(self) -> int:
        return self.value


class ScriptedRandomSource(RandomnessSource):
    """
    Replays a fixed sequence of values.

    With cycle=True the sequence repeats forever; otherwise the source
    fails once it is exhausted.
    """

    def __init__(self, values: Iterable[int], cycle: bool = True):
        self.values: List[int] = list(values)
        if not self.values:
            raise ValueError("ScriptedRandomSource needs at least one value")
        self.cycle = cycle
        self.calls = 0

    def next_u32(self) -> int:
        if self.calls >= len(self.values) and not self.cycle:
            raise LookupError(
                f"Scripted source exhausted after {len(self.values)} values"
            )
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def draw_u32(source: RandomnessSource) -> int:
    """
    Draw one value from a source.

    Raises:
        EntropyError: If the source raises or returns a value outside
            the uint32 range.
    """
    try:
        value = source.next_u32()
    except Exception as e:
        logger.error(f"Randomness source {type(source).__name__} failed: {e}")
        raise EntropyError(
            f"Randomness source failed: {e}",
            context={"source": type(source).__name__},
        ) from e

    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= U32_MAX:
        raise EntropyError(
            f"Randomness source returned {value!r}, expected a uint32",
            context={"source": type(source).__name__, "value": repr(value)},
        )
    return value
