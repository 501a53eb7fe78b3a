from __future__ import annotations

from typing import List, Tuple

from .board import Board, Coord
from .constants import TURN_ONE, TURN_TWO
from .logging_utils import get_logger
from .moves import neighbors

logger = get_logger(__name__)


def scoring_player(suit: str) -> int:
    """Suits with an odd character code score for player 1, even ones for player 2."""
    return TURN_ONE if ord(suit) % 2 != 0 else TURN_TWO


def chain_steps(board: Board, coord: Coord) -> List[Coord]:
    """Neighbors of ``coord`` holding a card of strictly higher rank."""
    rank = board.at(*coord).rank
    return [
        nxt for nxt in neighbors(board, coord)
        if board.is_occupied(*nxt) and board.at(*nxt).rank > rank
    ]


def longest_chain(board: Board, root: Coord) -> int:
    """
    Length of the longest rank-increasing chain starting at ``root`` and
    ending on a card of the root's suit (the root alone counts as 1).

    Every step moves to a strictly higher rank, so a chain visits at most
    nine cells and the search needs no visited set even though the torus
    itself is full of cycles.
    """
    suit = board.at(*root).suit
    best = 0

    def dfs(current: Coord, length: int) -> None:
        nonlocal best
        if board.at(*current).suit == suit:
            best = max(best, length)
        for nxt in chain_steps(board, current):
            dfs(nxt, length + 1)

    dfs(root, 1)
    return best


def calc_scores(board: Board) -> Tuple[int, int]:
    """Computes (player 1 score, player 2 score) for a finished board."""
    scores = {TURN_ONE: 0, TURN_TWO: 0}
    for coord in board.coords():
        card = board.at(*coord)
        if card.is_empty:
            continue
        player = scoring_player(card.suit)
        scores[player] = max(scores[player], longest_chain(board, coord))
    logger.debug('final scores %d/%d', scores[TURN_ONE], scores[TURN_TWO])
    return scores[TURN_ONE], scores[TURN_TWO]
