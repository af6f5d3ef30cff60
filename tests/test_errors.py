# Area: Shared Tests
"""Tests for the error hierarchy, error formatting and logging setup."""

import json
import logging

import pytest
from pebbles_game._shared.logging_config import log_game_error, setup_logging
from pebbles_game.error_formatter import format_error_block, indent_json
from pebbles_game.errors import (
    ConfigurationError,
    EntropyError,
    GameNotStartedError,
    IllegalMoveError,
    InvalidMessageError,
    PebblesGameError,
    TerminalStateError,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error_cls",
        [
            ConfigurationError,
            TerminalStateError,
            EntropyError,
            GameNotStartedError,
            InvalidMessageError,
        ],
    )
    def test_all_derive_from_base(self, error_cls):
        error = error_cls("boom")
        assert isinstance(error, PebblesGameError)
        assert str(error) == "boom"

    def test_error_types_are_distinct(self):
        types = {
            cls.error_type
            for cls in (
                ConfigurationError,
                IllegalMoveError,
                TerminalStateError,
                EntropyError,
                GameNotStartedError,
                InvalidMessageError,
            )
        }
        assert len(types) == 6

    def test_illegal_move_context(self):
        error = IllegalMoveError("Cannot remove 0 pebbles", count=0, max_take=2, pebbles_remaining=9)
        assert error.action == "turn"
        assert error.context == {"count": 0, "max_take": 2, "pebbles_remaining": 9}


class TestFormatting:
    def test_error_block_contents(self):
        block = format_error_block(
            error_type="ILLEGAL_MOVE",
            action="turn",
            payload={"count": 5},
            details=["Cannot remove more than max pebbles per turn"],
        )
        assert "ILLEGAL_MOVE" in block
        assert "Action:       turn" in block
        assert '"count": 5' in block
        assert "• Cannot remove more than max pebbles per turn" in block

    def test_error_block_without_payload(self):
        block = format_error_block("GAME_NOT_STARTED", None, {}, None)
        assert "GAME_NOT_STARTED" in block
        assert "PAYLOAD" not in block
        assert "Action:" not in block

    def test_format_error_log_includes_message(self):
        error = TerminalStateError("Game is already over", action="give_up", context={"winner": "human"})
        block = error.format_error_log()
        assert "TERMINAL_STATE" in block
        assert "Game is already over" in block

    def test_indent_json_falls_back_to_repr(self):
        data = {1: float("nan"), "key": {("tuple",): 1}}
        assert indent_json(data).startswith(" ")


class TestLoggingSetup:
    def test_writes_json_lines(self, tmp_path):
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(str(log_file), level=logging.INFO)
        try:
            logging.getLogger("pebbles_game.test").info("hello")
            for handler in logging.getLogger("pebbles_game").handlers:
                handler.flush()
            record = json.loads(log_file.read_text().strip().splitlines()[-1])
            assert record["message"] == "hello"
            assert record["logger"] == "pebbles_game.test"
            assert record["level"] == "INFO"
        finally:
            setup_logging(None)

    def test_does_not_propagate(self):
        setup_logging(None)
        assert logging.getLogger("pebbles_game").propagate is False

    def test_log_game_error_prints_block(self, capsys):
        setup_logging(None, level=logging.CRITICAL)
        log_game_error(ConfigurationError("Pebbles count must be greater than 0"))
        captured = capsys.readouterr()
        assert "CONFIGURATION_ERROR" in captured.err
