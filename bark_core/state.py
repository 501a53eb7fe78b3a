from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from .board import Board, Card
from .constants import TURN_ONE, TURN_TWO

Hand = Tuple[Card, ...]

HUMAN = 'h'
MACHINE = 'a'
PLAYER_TYPES = (HUMAN, MACHINE)


class Phase(Enum):
    NEW = 'new'        # no card on the board
    MIDDLE = 'middle'  # at least one card placed
    END = 'end'        # board full or the deck ran out


@dataclass(frozen=True)
class Deck:
    """The ordered deck as read from ``path``."""
    cards: Tuple[Card, ...]
    path: str

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class GameState:
    """Everything needed to continue a game: board, deck cursor, hands and whose turn it is."""
    board: Board
    deck: Deck
    cards_drawn: int
    hands: Tuple[Hand, Hand]
    turn: int  # 1 or 2
    phase: Phase
    player_types: Tuple[str, str] = (HUMAN, HUMAN)

    def other_player(self) -> int:
        return TURN_TWO if self.turn == TURN_ONE else TURN_ONE

    def hand(self, player: int) -> Hand:
        return self.hands[player - 1]

    def current_hand(self) -> Hand:
        return self.hand(self.turn)

    def player_type(self, player: int) -> str:
        return self.player_types[player - 1]

    def is_machine(self, player: int) -> bool:
        return self.player_type(player) == MACHINE

    def with_turn(self, next_turn: int) -> 'GameState':
        return replace(self, turn=next_turn)

    def with_hand(self, player: int, hand: Hand) -> 'GameState':
        hands = (hand, self.hands[1]) if player == TURN_ONE else (self.hands[0], hand)
        return replace(self, hands=hands)

    def ended(self) -> 'GameState':
        return replace(self, phase=Phase.END)
