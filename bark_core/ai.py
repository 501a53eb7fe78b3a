from __future__ import annotations

from .constants import TURN_TWO
from .moves import Move, placeable_cells
from .state import GameState, Phase


def choose_move(state: GameState) -> Move:
    """
    Picks the automated player's move: always the first card in hand.

    Player 1 takes the first placeable cell scanning from the top-left
    corner, player 2 the first scanning back from the bottom-right.
    """
    board = state.board
    if state.phase == Phase.NEW:
        return Move(slot=0, row=(board.height - 1) // 2, col=(board.width - 1) // 2)
    cells = placeable_cells(state)
    if not cells:
        raise ValueError('No placeable cell on the board')
    r, c = cells[-1] if state.turn == TURN_TWO else cells[0]
    return Move(slot=0, row=r, col=c)
