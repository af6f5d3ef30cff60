# Area: Protocol
"""
pebbles_game.messages - Wire models for configuration, actions and events
=========================================================================

Pydantic models for everything that crosses the dispatcher boundary.
Models check shape only (unsigned integers, known enum values); game
rules such as "max per turn must not exceed the pool" are enforced by
the state machine.

Wire examples:
    {"pebbles_count": 15, "max_pebbles_per_turn": 2, "difficulty": "hard"}
    {"kind": "turn", "count": 2}
    {"kind": "give_up"}
    {"kind": "restart", "pebbles_count": 6, "max_pebbles_per_turn": 2, "difficulty": "easy"}
    {"kind": "won", "winner": "human"}
    {"kind": "counter_turn", "count": 1}
"""

from __future__ import annotations
from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .enums import DifficultyLevel, Player
from .errors import InvalidMessageError
from .randomness import U32_MAX

UInt32 = Annotated[int, Field(ge=0, le=U32_MAX)]


def _lower_enum_value(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class PebblesInit(BaseModel):
    """Game configuration: pool size, per-turn maximum and difficulty."""

    model_config = ConfigDict(frozen=True)

    pebbles_count: UInt32
    max_pebbles_per_turn: UInt32
    difficulty: DifficultyLevel = DifficultyLevel.EASY

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value: Any) -> Any:
        return _lower_enum_value(value)


# ── Actions ────────────────────────────────────────────────────


class TurnAction(BaseModel):
    """The human removes `count` pebbles."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["turn"] = "turn"
    count: UInt32


class GiveUpAction(BaseModel):
    """The human concedes the current game."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["give_up"] = "give_up"


class RestartAction(BaseModel):
    """Discard the current game and start a new one."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["restart"] = "restart"
    pebbles_count: UInt32
    max_pebbles_per_turn: UInt32
    difficulty: DifficultyLevel = DifficultyLevel.EASY

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value: Any) -> Any:
        return _lower_enum_value(value)

    @classmethod
    def from_config(cls, config: PebblesInit) -> "RestartAction":
        return cls(
            pebbles_count=config.pebbles_count,
            max_pebbles_per_turn=config.max_pebbles_per_turn,
            difficulty=config.difficulty,
        )

    def to_config(self) -> PebblesInit:
        return PebblesInit(
            pebbles_count=self.pebbles_count,
            max_pebbles_per_turn=self.max_pebbles_per_turn,
            difficulty=self.difficulty,
        )


PebblesAction = Annotated[
    Union[TurnAction, GiveUpAction, RestartAction],
    Field(discriminator="kind"),
]


# ── Events ─────────────────────────────────────────────────────


class WonEvent(BaseModel):
    """The game ended; `winner` took the last pebble or the human conceded."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["won"] = "won"
    winner: Player

    @field_validator("winner", mode="before")
    @classmethod
    def normalize_winner(cls, value: Any) -> Any:
        return _lower_enum_value(value)


class CounterTurnEvent(BaseModel):
    """The computer answered by removing `count` pebbles."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["counter_turn"] = "counter_turn"
    count: UInt32


PebblesEvent = Annotated[
    Union[WonEvent, CounterTurnEvent],
    Field(discriminator="kind"),
]

_action_adapter: TypeAdapter = TypeAdapter(PebblesAction)
_event_adapter: TypeAdapter = TypeAdapter(PebblesEvent)


# ── Decoding helpers ───────────────────────────────────────────


def _validation_details(error: ValidationError) -> list:
    return [
        f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
        for item in error.errors()
    ]


def parse_init(message: Dict[str, Any]) -> PebblesInit:
    """
    Decode a raw configuration message.

    Raises:
        InvalidMessageError: If the message does not match PebblesInit.
    """
    try:
        return PebblesInit.model_validate(message)
    except ValidationError as e:
        raise InvalidMessageError(
            "Invalid PebblesInit message",
            action="init",
            context={"message": message},
            details=_validation_details(e),
        ) from e


def parse_action(message: Dict[str, Any]) -> Union[TurnAction, GiveUpAction, RestartAction]:
    """
    Decode a raw action message, dispatching on its "kind" field.

    Raises:
        InvalidMessageError: If the message matches no action variant.
    """
    try:
        return _action_adapter.validate_python(message)
    except ValidationError as e:
        raise InvalidMessageError(
            "Invalid PebblesAction message",
            action=str(message.get("kind")) if isinstance(message, dict) else None,
            context={"message": message},
            details=_validation_details(e),
        ) from e


def parse_event(message: Dict[str, Any]) -> Union[WonEvent, CounterTurnEvent]:
    """Decode a raw event message (used by clients of the dispatcher)."""
    try:
        return _event_adapter.validate_python(message)
    except ValidationError as e:
        raise InvalidMessageError(
            "Invalid PebblesEvent message",
            context={"message": message},
            details=_validation_details(e),
        ) from e


def dump_event(event: Union[WonEvent, CounterTurnEvent]) -> Dict[str, Any]:
    """Encode an event as a JSON-ready dict."""
    return event.model_dump(mode="json")
