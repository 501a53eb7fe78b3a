from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO, Tuple

from .constants import EXIT_OK, MAX_DIMENSION, MIN_DIMENSION
from .controller import run_game
from .deal import load_deck, new_game, read_int
from .errors import ArgumentError, FatalError, InvalidArgumentError
from .logging_utils import get_logger, setup_logging
from .savefile import load_game
from .state import GameState, PLAYER_TYPES

logger = get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage problems as ArgumentError instead of exiting with argparse's status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='bark',
        description='Two-player card placement game on a wrap-around grid.',
        usage='%(prog)s savefile p1type p2type\n       %(prog)s deck width height p1type p2type',
        add_help=False,
    )
    parser.add_argument('args', nargs='*', help="player types are 'h' (human) or 'a' (automated)")
    return parser


def check_player(text: str) -> str:
    if text not in PLAYER_TYPES:
        raise InvalidArgumentError(f'bad player type {text!r}')
    return text


def check_dimension(text: str) -> int:
    value = read_int(text)
    if value is None or value < MIN_DIMENSION or value > MAX_DIMENSION:
        raise InvalidArgumentError(f'bad board dimension {text!r}')
    return value


def start_game(args: List[str]) -> GameState:
    """Builds the starting state from either of the two argument forms."""
    if len(args) == 3:
        save_path, p1, p2 = args
        player_types: Tuple[str, str] = (check_player(p1), check_player(p2))
        return load_game(save_path, player_types)
    if len(args) == 5:
        deck_path, width_s, height_s, p1, p2 = args
        width = check_dimension(width_s)
        height = check_dimension(height_s)
        player_types = (check_player(p1), check_player(p2))
        deck = load_deck(deck_path)
        return new_game(deck, width, height, player_types)
    raise ArgumentError(f'expected 3 or 5 arguments, got {len(args)}')


def run(argv: Optional[List[str]] = None, inp: Optional[TextIO] = None,
        out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Runs one game and returns the process exit status."""
    err = err if err is not None else sys.stderr
    try:
        argv = sys.argv[1:] if argv is None else argv
        # '--' keeps paths such as '-h' or '-x.deck' positional
        ns = build_parser().parse_args(['--'] + list(argv))
        state = start_game(ns.args)
        run_game(state, inp, out)
    except FatalError as exc:
        logger.debug('fatal: %s', exc)
        print(exc.message, file=err)
        return exc.exit_code
    return EXIT_OK


def main() -> None:
    setup_logging()
    sys.exit(run())
