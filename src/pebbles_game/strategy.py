# Area: Core
"""
pebbles_game.strategy - Computer strategy engine
================================================

Computes how many pebbles the computer removes on its turn.

Easy plays a uniformly random legal move. Hard plays the optimal move
of the subtraction game: with m = max_pebbles_per_turn + 1, positions
where the pool is a multiple of m are lost for the mover, so the
computer removes `pool mod m` to hand such a position back. When it is
already in one it removes a single pebble and waits for a mistake.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Dict

from .enums import DifficultyLevel
from .errors import TerminalStateError
from .randomness import RandomnessSource, draw_u32
from .state import GameState

logger = logging.getLogger("pebbles_game.strategy")


class Strategy(ABC):
    """
    Abstract base class for computer strategies.

    compute() must return a count in [1, state.max_take].
    """

    difficulty: DifficultyLevel

    @abstractmethod
    def compute(self, state: GameState, rng: RandomnessSource) -> int:
        pass


class EasyStrategy(Strategy):
    """Uniformly random legal move."""

    difficulty = DifficultyLevel.EASY

    def compute(self, state: GameState, rng: RandomnessSource) -> int:
        return draw_u32(rng) % state.max_take + 1


class HardStrategy(Strategy):
    """Optimal move; never consults the randomness source."""

    difficulty = DifficultyLevel.HARD

    def compute(self, state: GameState, rng: RandomnessSource) -> int:
        target = state.pebbles_remaining % (state.max_pebbles_per_turn + 1)
        if target == 0:
            return 1
        return target


STRATEGIES: Dict[DifficultyLevel, Strategy] = {
    DifficultyLevel.EASY: EasyStrategy(),
    DifficultyLevel.HARD: HardStrategy(),
}


def get_strategy(difficulty: DifficultyLevel) -> Strategy:
    return STRATEGIES[difficulty]


def compute_computer_turn(state: GameState, rng: RandomnessSource) -> int:
    """
    Compute the computer's removal count for the current state.

    Args:
        state: State with the computer to move
        rng: Randomness source (only used by Easy)

    Returns:
        Count in [1, min(max_pebbles_per_turn, pebbles_remaining)]

    Raises:
        TerminalStateError: If the game is over or no legal move exists
        EntropyError: If Easy cannot draw from the source
    """
    if state.is_terminal or state.max_take < 1:
        raise TerminalStateError(
            "Computer cannot move: game is already over",
            action="computer_turn",
            context=state.to_dict(),
        )

    count = get_strategy(state.difficulty).compute(state, rng)
    logger.debug(
        f"[{state.difficulty.value}] computer takes {count} "
        f"of {state.pebbles_remaining} (max {state.max_take})"
    )
    return count
