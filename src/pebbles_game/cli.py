# Area: Shared
"""
pebbles_game.cli - Command-line interface
=========================================

Plays a game against the computer in the terminal.

Usage:
    pebbles-game                                   # defaults / env / .env
    pebbles-game --pebbles 21 --max-per-turn 3 --difficulty hard
    pebbles-game --config game.json --seed 7       # reproducible session

In-game commands:
    <number>   take that many pebbles
    give up    concede the game
    restart    start a new game with the same configuration
    state      show the current state
    quit       leave
"""

import argparse
import logging
from typing import Callable, List, Optional

from ._shared.logging_config import log_game_error, setup_logging
from .config import load_config
from .dispatcher import PebblesDispatcher
from .enums import Player
from .errors import EntropyError, PebblesGameError
from .messages import CounterTurnEvent, PebblesInit, RestartAction, parse_action
from .randomness import SeededRandomSource, SystemRandomSource
from .state_machine import Event

PLAYER_NAMES = {
    Player.HUMAN: "You",
    Player.COMPUTER: "The computer",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Pebbles - take 1..N pebbles per turn, whoever takes the last one wins",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pebbles-game
  pebbles-game --pebbles 21 --max-per-turn 3 --difficulty hard
  PEBBLES_DIFFICULTY=hard pebbles-game --seed 7
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--pebbles", type=int, help="Total pebble count")
    parser.add_argument("--max-per-turn", type=int, help="Maximum pebbles per turn")
    parser.add_argument(
        "--difficulty",
        type=str.lower,
        choices=["easy", "hard"],
        help="Computer strategy",
    )
    parser.add_argument("--seed", type=int, help="Seed for a reproducible game")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write JSON logs to this file",
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug logs")

    return parser.parse_args(argv)


def describe_events(events: List[Event]) -> List[str]:
    """Render dispatcher events as lines of text."""
    lines = []
    for event in events:
        if isinstance(event, CounterTurnEvent):
            lines.append(f"The computer takes {event.count}.")
        else:
            lines.append(f"{PLAYER_NAMES[event.winner]} won!")
    return lines


def run_session(
    dispatcher: PebblesDispatcher,
    config: PebblesInit,
    read_line: Optional[Callable[[str], str]] = None,
    write: Callable[[str], None] = print,
) -> int:
    """
    Drive one interactive session until the player quits.

    Returns the process exit code.
    """
    read_line = read_line or input
    try:
        events = dispatcher.on_start(config)
    except EntropyError as e:
        log_game_error(e)
        return 1

    write(
        f"{config.pebbles_count} pebbles, take 1 to {config.max_pebbles_per_turn} "
        f"per turn ({config.difficulty.value}). Last pebble wins."
    )
    _announce(dispatcher, events, write)

    while True:
        try:
            line = read_line("> ").strip().lower()
        except EOFError:
            return 0

        if line in ("quit", "exit", "q"):
            return 0
        if line == "state":
            write(str(dispatcher.query_state()))
            continue

        if line in ("give up", "giveup", "give_up"):
            message = {"kind": "give_up"}
        elif line == "restart":
            message = RestartAction.from_config(config).model_dump(mode="json")
        elif line.isascii() and line.isdigit():
            message = {"kind": "turn", "count": int(line)}
        else:
            write("Enter a number, 'give up', 'restart', 'state' or 'quit'.")
            continue

        try:
            action = parse_action(message)
            events = dispatcher.on_action(action)
        except EntropyError as e:
            log_game_error(e)
            return 1
        except PebblesGameError as e:
            log_game_error(e)
            continue

        if isinstance(action, RestartAction):
            write("New game.")
        _announce(dispatcher, events, write)


def _announce(
    dispatcher: PebblesDispatcher, events: List[Event], write: Callable[[str], None]
) -> None:
    state = dispatcher.on_query()
    for line in describe_events(events):
        write(line)
    if state.is_terminal:
        write("Type 'restart' to play again or 'quit' to leave.")
    else:
        write(f"{state.pebbles_remaining} left. Your move (1-{state.max_take}).")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(
        log_file_path=args.log_file,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        config = load_config(
            args.config,
            overrides={
                "pebbles_count": args.pebbles,
                "max_pebbles_per_turn": args.max_per_turn,
                "difficulty": args.difficulty,
            },
        )
    except PebblesGameError as e:
        log_game_error(e)
        return 1

    rng = SeededRandomSource(args.seed) if args.seed is not None else SystemRandomSource()
    dispatcher = PebblesDispatcher(rng=rng)

    try:
        return run_session(dispatcher, config)
    except PebblesGameError as e:
        log_game_error(e)
        return 1
