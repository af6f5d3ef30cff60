"""
pebbles_game - Pebble-subtraction game against the computer
===========================================================

A shared pool of pebbles starts at a configured count. Each turn a party
removes 1 to max_pebbles_per_turn pebbles; whoever takes the last pebble
wins. The computer plays Easy (random legal move) or Hard (optimal move).

Quick Start:
    from pebbles_game import PebblesDispatcher, PebblesInit, TurnAction

    dispatcher = PebblesDispatcher()
    events = dispatcher.on_start(PebblesInit(pebbles_count=15, max_pebbles_per_turn=2))
    events = dispatcher.on_action(TurnAction(count=2))
    state = dispatcher.on_query()

Raw messages:
    dispatcher.handle_init({"pebbles_count": 15, "max_pebbles_per_turn": 2,
                            "difficulty": "hard"})
    dispatcher.handle_message({"kind": "turn", "count": 1})
    dispatcher.query_state()
"""

from .dispatcher import PebblesDispatcher
from .enums import DifficultyLevel, Player
from .errors import (
    PebblesGameError,
    ConfigurationError,
    IllegalMoveError,
    TerminalStateError,
    EntropyError,
    GameNotStartedError,
    InvalidMessageError,
)
from .messages import (
    PebblesInit,
    TurnAction,
    GiveUpAction,
    RestartAction,
    WonEvent,
    CounterTurnEvent,
)
from .randomness import (
    RandomnessSource,
    SystemRandomSource,
    SeededRandomSource,
    ScriptedRandomSource,
    ConstantRandomSource,
)
from .state import GameState
from .strategy import compute_computer_turn

__all__ = [
    # Main classes
    "PebblesDispatcher",
    "GameState",
    "compute_computer_turn",
    # Enums
    "DifficultyLevel",
    "Player",
    # Errors
    "PebblesGameError",
    "ConfigurationError",
    "IllegalMoveError",
    "TerminalStateError",
    "EntropyError",
    "GameNotStartedError",
    "InvalidMessageError",
    # Messages
    "PebblesInit",
    "TurnAction",
    "GiveUpAction",
    "RestartAction",
    "WonEvent",
    "CounterTurnEvent",
    # Randomness
    "RandomnessSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "ScriptedRandomSource",
    "ConstantRandomSource",
]
__version__ = "1.0.0"
