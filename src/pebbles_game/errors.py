# Area: Core
"""
pebbles_game.errors - Custom exception classes
==============================================

Defines the exception hierarchy for rejected game calls.
Every rejection happens before any state is replaced, so callers
can rely on "failed call = no change". Each exception stores its
context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class PebblesGameError(Exception):
    """Base exception for all pebbles_game errors."""

    error_type = "GAME_ERROR"

    def __init__(
        self,
        message: str,
        action: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        details: Optional[List[str]] = None,
    ):
        self.action = action
        self.context = context or {}
        self.details = details or []
        super().__init__(message)

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            action=self.action,
            payload=self.context,
            details=[str(self)] + self.details,
        )


class ConfigurationError(PebblesGameError):
    """Raised when a game configuration is rejected before a state exists."""

    error_type = "CONFIGURATION_ERROR"


class IllegalMoveError(PebblesGameError):
    """Raised when a human turn removes 0, too many, or more than remain."""

    error_type = "ILLEGAL_MOVE"

    def __init__(self, message: str, count: int, max_take: int, pebbles_remaining: int):
        self.count = count
        self.max_take = max_take
        self.pebbles_remaining = pebbles_remaining
        super().__init__(
            message,
            action="turn",
            context={
                "count": count,
                "max_take": max_take,
                "pebbles_remaining": pebbles_remaining,
            },
        )


class TerminalStateError(PebblesGameError):
    """Raised when a turn or concession arrives after the game is won."""

    error_type = "TERMINAL_STATE"


class EntropyError(PebblesGameError):
    """Raised when the randomness source fails to produce a value."""

    error_type = "ENTROPY_FAILURE"


class GameNotStartedError(PebblesGameError):
    """Raised when an action or query arrives before any game was started."""

    error_type = "GAME_NOT_STARTED"


class InvalidMessageError(PebblesGameError):
    """Raised when an inbound message cannot be decoded."""

    error_type = "INVALID_MESSAGE"
