# Area: Core
"""
pebbles_game.state - Game state model
=====================================

The single persistent entity of a game: the pool, who moved first, and
the winner once there is one. Instances are immutable; every transition
in state_machine builds a new one, so a snapshot handed to a reader can
never change underneath it.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
import logging

from .enums import DifficultyLevel, Player
from .messages import PebblesInit

logger = logging.getLogger("pebbles_game.state")


@dataclass(frozen=True)
class GameState:
    """
    Full state of one game.

    Configuration fields are embedded for introspection; they never
    change within a game.
    """
    pebbles_count: int
    max_pebbles_per_turn: int
    difficulty: DifficultyLevel
    pebbles_remaining: int
    first_player: Player
    winner: Optional[Player] = None

    @classmethod
    def initial(cls, config: PebblesInit, first_player: Player) -> "GameState":
        return cls(
            pebbles_count=config.pebbles_count,
            max_pebbles_per_turn=config.max_pebbles_per_turn,
            difficulty=config.difficulty,
            pebbles_remaining=config.pebbles_count,
            first_player=first_player,
        )

    @property
    def is_terminal(self) -> bool:
        return self.winner is not None

    @property
    def max_take(self) -> int:
        """Largest legal removal for the party about to move."""
        return min(self.max_pebbles_per_turn, self.pebbles_remaining)

    @property
    def config(self) -> PebblesInit:
        return PebblesInit(
            pebbles_count=self.pebbles_count,
            max_pebbles_per_turn=self.max_pebbles_per_turn,
            difficulty=self.difficulty,
        )

    # ── Transition helpers ───────────────────────────────────

    def remove(self, count: int, party: Player) -> "GameState":
        """Return the state after `party` removes `count` pebbles."""
        remaining = self.pebbles_remaining - count
        winner = party if remaining == 0 else None
        logger.debug(
            f"{party.value} removes {count}: {self.pebbles_remaining} → {remaining}"
        )
        return replace(self, pebbles_remaining=remaining, winner=winner)

    def with_winner(self, party: Player) -> "GameState":
        return replace(self, winner=party)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pebbles_count": self.pebbles_count,
            "max_pebbles_per_turn": self.max_pebbles_per_turn,
            "difficulty": self.difficulty.value,
            "pebbles_remaining": self.pebbles_remaining,
            "first_player": self.first_player.value,
            "winner": self.winner.value if self.winner else None,
        }
