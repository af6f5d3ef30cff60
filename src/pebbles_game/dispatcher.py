# Area: Protocol
"""
pebbles_game.dispatcher - Protocol dispatcher
=============================================

External entry points of the game: start, handle one action, query
the current state. The dispatcher owns the single GameState and is its
only writer; a lock serializes calls so a reader never sees a state
half-way through an action.

Usage:
    dispatcher = PebblesDispatcher(rng=SeededRandomSource(7))
    events = dispatcher.on_start(PebblesInit(pebbles_count=15, max_pebbles_per_turn=2))
    events = dispatcher.on_action(TurnAction(count=2))
    state = dispatcher.on_query()
"""

from __future__ import annotations
import logging
import threading
from typing import Any, Dict, List, Optional, Union

from . import state_machine
from .errors import GameNotStartedError
from .messages import (
    GiveUpAction,
    PebblesInit,
    RestartAction,
    TurnAction,
    dump_event,
    parse_action,
    parse_init,
)
from .randomness import RandomnessSource, SystemRandomSource
from .state import GameState
from .state_machine import Event

logger = logging.getLogger("pebbles_game.dispatcher")

Action = Union[TurnAction, GiveUpAction, RestartAction]


class PebblesDispatcher:
    """
    Stateful message handler for one game at a time.

    Attributes:
        rng: Randomness source handed to the state machine
    """

    def __init__(self, rng: Optional[RandomnessSource] = None):
        self.rng = rng or SystemRandomSource()
        self._state: Optional[GameState] = None
        self._lock = threading.Lock()

    @property
    def started(self) -> bool:
        return self._state is not None

    def on_start(self, config: PebblesInit) -> List[Event]:
        """
        Start a game.

        Returns the computer's opening event when it moves first,
        an empty list when the human moves first. Calling this on a
        running dispatcher replaces the current game.
        """
        with self._lock:
            logger.info(f"Handling start: {config.model_dump(mode='json')}")
            self._state = state_machine.start(config, self.rng)
            return self._opening_events()

    def on_action(self, action: Action) -> List[Event]:
        """
        Apply one action and return the resulting events.

        Raises:
            GameNotStartedError: If a turn or give-up arrives before any start
            IllegalMoveError, TerminalStateError, ConfigurationError,
            EntropyError: Propagated from the state machine; the current
                state is left unchanged
        """
        with self._lock:
            logger.info(f"Handling {action.kind}: {action.model_dump(mode='json')}")

            if isinstance(action, RestartAction):
                self._state = state_machine.restart(action.to_config(), self.rng)
                return self._opening_events()

            state = self._require_state(action.kind)

            if isinstance(action, TurnAction):
                self._state, event = state_machine.apply_human_turn(
                    state, action.count, self.rng
                )
                return [event]

            if isinstance(action, GiveUpAction):
                self._state, event = state_machine.concede(state)
                return [event]

            raise TypeError(f"Unsupported action: {action!r}")

    def on_query(self) -> GameState:
        """
        Return the current state.

        GameState is immutable, so the returned value is a stable
        snapshot.
        """
        with self._lock:
            return self._require_state("query")

    # ── Raw message entry points ─────────────────────────────

    def handle_init(self, message: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Decode a raw PebblesInit, start the game, return encoded events."""
        return [dump_event(event) for event in self.on_start(parse_init(message))]

    def handle_message(self, message: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Decode a raw action, dispatch it, return encoded events."""
        return [dump_event(event) for event in self.on_action(parse_action(message))]

    def query_state(self) -> Dict[str, Any]:
        return self.on_query().to_dict()

    # ── Internal helpers ─────────────────────────────────────

    def _require_state(self, action: str) -> GameState:
        if self._state is None:
            raise GameNotStartedError("Game state not initialized", action=action)
        return self._state

    def _opening_events(self) -> List[Event]:
        event = state_machine.opening_event(self._state)
        if event is None:
            logger.info("Human moves first, waiting for a turn")
            return []
        return [event]
