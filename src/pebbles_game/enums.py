# Area: Core
"""
pebbles_game.enums - Parties and difficulty levels
==================================================

Enumerations shared by the state model, the strategy engine and the
wire messages. Values are the lowercase strings used on the wire.
"""

from enum import Enum


class Player(Enum):
    """
    The two parties of a game.

    HUMAN is driven by inbound actions, COMPUTER by the strategy engine.
    """
    HUMAN = "human"
    COMPUTER = "computer"


class DifficultyLevel(Enum):
    """
    Selects the computer's strategy.

    EASY -> uniformly random legal move
    HARD -> optimal subtraction-game move
    """
    EASY = "easy"
    HARD = "hard"
