from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Union

from .board import Board, Coord
from .constants import HAND_SIZE, SAVE_PREFIX
from .deal import read_int
from .logging_utils import get_logger
from .state import GameState, Phase

logger = get_logger(__name__)


@dataclass(frozen=True)
class Move:
    """A placement: hand slot, row and column, all 0-based."""
    slot: int
    row: int
    col: int


@dataclass(frozen=True)
class SaveRequest:
    path: str


Command = Union[Move, SaveRequest]


def wrap_step(board: Board, r: int, c: int) -> Coord:
    """Wraps coordinates around the board."""
    return r % board.height, c % board.width


def neighbors(board: Board, coord: Coord) -> List[Coord]:
    """Gets the orthogonal neighbors of a coordinate: up, down, left, right."""
    r, c = coord
    return [
        wrap_step(board, r - 1, c),
        wrap_step(board, r + 1, c),
        wrap_step(board, r, c - 1),
        wrap_step(board, r, c + 1),
    ]


def in_bounds(board: Board, r: int, c: int) -> bool:
    return 0 <= r < board.height and 0 <= c < board.width


def is_placeable(state: GameState, r: int, c: int) -> bool:
    """A card may go anywhere on a new board, else on an empty cell touching a card."""
    if state.phase == Phase.NEW:
        return True
    board = state.board
    if board.is_occupied(r, c):
        return False
    return any(board.is_occupied(nr, nc) for nr, nc in neighbors(board, (r, c)))


def placeable_cells(state: GameState) -> List[Coord]:
    """All cells a card could be placed on, in row-major order."""
    return [(r, c) for r, c in state.board.coords() if is_placeable(state, r, c)]


def parse_command(line: str) -> Optional[Command]:
    """
    Parses one line of human input.

    Either ``SAVE<path>`` or ``<slot> <col> <row>`` with 1-based numbers
    separated by single spaces. Returns None for anything else. Only the
    syntax is checked here; see validate_move for the game rules.
    """
    if len(line) < 5:
        return None
    if line.startswith(SAVE_PREFIX):
        return SaveRequest(line[len(SAVE_PREFIX):])
    tokens = line.split(' ')
    if len(tokens) != 3:
        return None
    numbers = [read_int(t) for t in tokens]
    if any(n is None for n in numbers):
        return None
    slot, col, row = numbers
    return Move(slot=slot - 1, row=row - 1, col=col - 1)


def validate_move(state: GameState, move: Move) -> bool:
    """Checks a move against the current hand and board without changing anything."""
    hand = state.current_hand()
    if move.slot < 0 or move.slot >= min(len(hand), HAND_SIZE):
        return False
    if not in_bounds(state.board, move.row, move.col):
        return False
    return is_placeable(state, move.row, move.col)


def apply_move(state: GameState, move: Move) -> GameState:
    """Plays the card at ``move.slot`` onto the board. The turn does not change."""
    hand = state.current_hand()
    card = hand[move.slot]
    rest = hand[:move.slot] + hand[move.slot + 1:]
    board = state.board.place(move.row, move.col, card)
    phase = Phase.MIDDLE if state.phase == Phase.NEW else state.phase
    logger.debug('player %d plays %s at row %d col %d', state.turn, card, move.row, move.col)
    return replace(state.with_hand(state.turn, rest), board=board, phase=phase)


def try_move(state: GameState, move: Move) -> Optional[GameState]:
    """Applies ``move`` if it is legal, else returns None and leaves ``state`` as it was."""
    if not validate_move(state, move):
        return None
    return apply_move(state, move)
