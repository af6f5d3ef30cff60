# Area: Core
"""
pebbles_game.state_machine - Game state machine
===============================================

Applies party actions to a GameState and decides the winner. Every
operation takes the current state and returns a new one; validation
happens before anything is built, so a rejected call leaves the
caller's state exactly as it was.

    start/restart ──► in progress ──► won (HUMAN or COMPUTER)
                        │    ▲
                        └────┘ turn → counter turn
"""

from __future__ import annotations
import logging
from typing import Optional, Tuple, Union

from .enums import Player
from .errors import ConfigurationError, IllegalMoveError, TerminalStateError
from .messages import CounterTurnEvent, PebblesInit, WonEvent
from .randomness import RandomnessSource, draw_u32
from .state import GameState
from .strategy import compute_computer_turn

logger = logging.getLogger("pebbles_game.state_machine")

Event = Union[WonEvent, CounterTurnEvent]


def validate_config(config: PebblesInit) -> None:
    """
    Validate game configuration.

    Raises:
        ConfigurationError: If the pool or the per-turn maximum is zero,
            or the maximum exceeds the pool
    """
    context = config.model_dump(mode="json")
    if config.pebbles_count == 0:
        raise ConfigurationError(
            "Pebbles count must be greater than 0", action="start", context=context
        )
    if config.max_pebbles_per_turn == 0:
        raise ConfigurationError(
            "Max pebbles per turn must be greater than 0", action="start", context=context
        )
    if config.max_pebbles_per_turn > config.pebbles_count:
        raise ConfigurationError(
            "Max pebbles per turn cannot exceed total pebbles",
            action="start",
            context=context,
        )


def choose_first_player(rng: RandomnessSource) -> Player:
    """Even draw → HUMAN, odd draw → COMPUTER."""
    if draw_u32(rng) % 2 == 0:
        return Player.HUMAN
    return Player.COMPUTER


def start(config: PebblesInit, rng: RandomnessSource) -> GameState:
    """
    Create a new game from a configuration.

    If the computer is drawn to move first it plays its opening turn
    before the state is returned, so the state may already be won.
    """
    validate_config(config)
    first_player = choose_first_player(rng)
    state = GameState.initial(config, first_player)
    logger.info(
        f"Game started: {config.pebbles_count} pebbles, max {config.max_pebbles_per_turn}"
        f"/turn, {config.difficulty.value}, {first_player.value} moves first"
    )

    if first_player == Player.COMPUTER:
        state, _ = _computer_turn(state, rng)
    return state


def restart(config: PebblesInit, rng: RandomnessSource) -> GameState:
    """Start over with a new configuration, discarding any prior game."""
    logger.info("Restarting game")
    return start(config, rng)


def apply_human_turn(
    state: GameState, count: int, rng: RandomnessSource
) -> Tuple[GameState, Event]:
    """
    Apply a human turn and, unless it wins, the computer's answer.

    Returns:
        (new_state, WonEvent) if either party emptied the pool,
        (new_state, CounterTurnEvent) otherwise

    Raises:
        TerminalStateError: If the game is already won
        IllegalMoveError: If count is 0, above the per-turn maximum,
            or above the remaining pool
    """
    _ensure_in_progress(state, "turn")

    if count < 1:
        raise _illegal(state, count, "Count must be at least 1")
    if count > state.max_pebbles_per_turn:
        raise _illegal(state, count, "Cannot remove more than max pebbles per turn")
    if count > state.pebbles_remaining:
        raise _illegal(state, count, "Cannot remove more pebbles than remaining")

    state = state.remove(count, Player.HUMAN)
    if state.is_terminal:
        logger.info("Human took the last pebble and wins")
        return state, WonEvent(winner=Player.HUMAN)

    return _computer_turn(state, rng)


def concede(state: GameState) -> Tuple[GameState, Event]:
    """
    The human gives up: the computer wins whatever the pool holds.

    Raises:
        TerminalStateError: If the game is already won
    """
    _ensure_in_progress(state, "give_up")
    logger.info(f"Human conceded with {state.pebbles_remaining} pebbles left")
    return state.with_winner(Player.COMPUTER), WonEvent(winner=Player.COMPUTER)


def opening_event(state: GameState) -> Optional[Event]:
    """
    Event announcing the computer's opening move of a fresh game.

    None when the human moves first.
    """
    if state.first_player != Player.COMPUTER:
        return None
    if state.winner == Player.COMPUTER:
        return WonEvent(winner=Player.COMPUTER)
    return CounterTurnEvent(count=state.pebbles_count - state.pebbles_remaining)


# ── Internal helpers ─────────────────────────────────────────


def _computer_turn(state: GameState, rng: RandomnessSource) -> Tuple[GameState, Event]:
    count = compute_computer_turn(state, rng)
    state = state.remove(count, Player.COMPUTER)
    if state.is_terminal:
        logger.info(f"Computer took the last {count} pebble(s) and wins")
        return state, WonEvent(winner=Player.COMPUTER)
    logger.info(f"Computer takes {count}, {state.pebbles_remaining} left")
    return state, CounterTurnEvent(count=count)


def _ensure_in_progress(state: GameState, action: str) -> None:
    if state.is_terminal:
        logger.warning(f"Rejected {action}: game already won by {state.winner.value}")
        raise TerminalStateError(
            "Game is already over",
            action=action,
            context=state.to_dict(),
        )


def _illegal(state: GameState, count: int, message: str) -> IllegalMoveError:
    logger.warning(f"Rejected turn({count}): {message}")
    return IllegalMoveError(
        message,
        count=count,
        max_take=state.max_take,
        pebbles_remaining=state.pebbles_remaining,
    )
