# Area: Protocol Tests
"""Tests for wire message models."""

import pytest
from pydantic import ValidationError
from pebbles_game.enums import DifficultyLevel, Player
from pebbles_game.errors import InvalidMessageError
from pebbles_game.messages import (
    CounterTurnEvent,
    GiveUpAction,
    PebblesInit,
    RestartAction,
    TurnAction,
    WonEvent,
    dump_event,
    parse_action,
    parse_event,
    parse_init,
)


class TestPebblesInit:
    def test_defaults_to_easy(self):
        init = PebblesInit(pebbles_count=10, max_pebbles_per_turn=3)
        assert init.difficulty == DifficultyLevel.EASY

    def test_difficulty_case_insensitive(self):
        init = parse_init({"pebbles_count": 10, "max_pebbles_per_turn": 3, "difficulty": " Hard "})
        assert init.difficulty == DifficultyLevel.HARD

    def test_zero_is_accepted_at_decode_time(self):
        """Zero counts are a game rule, checked by the state machine."""
        init = parse_init({"pebbles_count": 0, "max_pebbles_per_turn": 0})
        assert init.pebbles_count == 0

    @pytest.mark.parametrize(
        "message",
        [
            {"pebbles_count": -1, "max_pebbles_per_turn": 1},
            {"pebbles_count": 2**32, "max_pebbles_per_turn": 1},
            {"pebbles_count": 5, "max_pebbles_per_turn": 1, "difficulty": "nightmare"},
            {"max_pebbles_per_turn": 1},
        ],
    )
    def test_bad_shape_rejected(self, message):
        with pytest.raises(InvalidMessageError) as exc_info:
            parse_init(message)
        assert exc_info.value.details
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_uint32_bound_shared_with_randomness(self):
        """Wire counts and random draws use the same upper bound."""
        from pebbles_game import messages, randomness

        assert messages.U32_MAX is randomness.U32_MAX
        assert parse_init({"pebbles_count": messages.U32_MAX, "max_pebbles_per_turn": 1}).pebbles_count == messages.U32_MAX

    def test_frozen(self):
        init = PebblesInit(pebbles_count=10, max_pebbles_per_turn=3)
        with pytest.raises(ValidationError):
            init.pebbles_count = 5


class TestActions:
    def test_parse_turn(self):
        assert parse_action({"kind": "turn", "count": 2}) == TurnAction(count=2)

    def test_parse_give_up(self):
        assert parse_action({"kind": "give_up"}) == GiveUpAction()

    def test_parse_restart(self):
        action = parse_action(
            {"kind": "restart", "pebbles_count": 6, "max_pebbles_per_turn": 2, "difficulty": "easy"}
        )
        assert isinstance(action, RestartAction)
        assert action.to_config() == PebblesInit(
            pebbles_count=6, max_pebbles_per_turn=2, difficulty=DifficultyLevel.EASY
        )

    def test_restart_from_config(self):
        config = PebblesInit(pebbles_count=9, max_pebbles_per_turn=4, difficulty=DifficultyLevel.HARD)
        assert RestartAction.from_config(config).to_config() == config

    @pytest.mark.parametrize(
        "message",
        [
            {"kind": "unknown"},
            {"count": 1},
            {"kind": "turn"},
            {"kind": "turn", "count": -2},
        ],
    )
    def test_invalid_actions(self, message):
        with pytest.raises(InvalidMessageError):
            parse_action(message)


class TestEvents:
    def test_dump_won(self):
        assert dump_event(WonEvent(winner=Player.HUMAN)) == {"kind": "won", "winner": "human"}

    def test_dump_counter_turn(self):
        assert dump_event(CounterTurnEvent(count=3)) == {"kind": "counter_turn", "count": 3}

    def test_parse_event(self):
        assert parse_event({"kind": "won", "winner": "Computer"}) == WonEvent(
            winner=Player.COMPUTER
        )
        assert parse_event({"kind": "counter_turn", "count": 1}) == CounterTurnEvent(count=1)

    def test_parse_event_rejects_unknown(self):
        with pytest.raises(InvalidMessageError):
            parse_event({"kind": "draw"})
