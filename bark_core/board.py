from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .constants import EMPTY_CODE, EMPTY_DISPLAY, EMPTY_SYMBOL

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Card:
    """A playing card: rank 1-9 and suit 'A'-'Z'. Rank 0 marks the empty card."""
    rank: int
    suit: str

    @property
    def is_empty(self) -> bool:
        return self.suit == EMPTY_SYMBOL

    @property
    def code(self) -> str:
        """Two-character form used by deck and save files."""
        if self.is_empty:
            return EMPTY_CODE
        return f"{self.rank}{self.suit}"

    def __str__(self) -> str:
        return self.code

    @classmethod
    def parse(cls, text: str, allow_empty: bool = False) -> Optional['Card']:
        """Parses a two-character card code, returning None when it is malformed."""
        if len(text) != 2:
            return None
        if text == EMPTY_CODE:
            return EMPTY_CARD if allow_empty else None
        num, suit = text[0], text[1]
        if not ('1' <= num <= '9') or not ('A' <= suit <= 'Z'):
            return None
        return cls(rank=int(num), suit=suit)


EMPTY_CARD = Card(rank=0, suit=EMPTY_SYMBOL)


@dataclass(frozen=True)
class Board:
    """Represents the playing grid: its dimensions and a row-major tuple of cards."""
    width: int
    height: int
    grid: Tuple[Card, ...]  # row-major, length == width * height

    @classmethod
    def blank(cls, width: int, height: int) -> 'Board':
        return cls(width=width, height=height, grid=(EMPTY_CARD,) * (width * height))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Card]]) -> 'Board':
        flat: List[Card] = []
        height = 0
        width = 0
        for row in rows:
            cells = list(row)
            if height and len(cells) != width:
                raise ValueError('Board rows must all have the same width')
            width = len(cells)
            flat.extend(cells)
            height += 1
        return cls(width=width, height=height, grid=tuple(flat))

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.width + c

    def at(self, r: int, c: int) -> Card:
        """Gets the card at a given row and column with wrap-around logic."""
        return self.grid[self.index(r % self.height, c % self.width)]

    def is_occupied(self, r: int, c: int) -> bool:
        return not self.at(r, c).is_empty

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board in row-major order."""
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def occupied_count(self) -> int:
        return sum(1 for card in self.grid if not card.is_empty)

    def is_empty(self) -> bool:
        return self.occupied_count() == 0

    def is_full(self) -> bool:
        return all(not card.is_empty for card in self.grid)

    def place(self, r: int, c: int, card: Card) -> 'Board':
        """Returns a new board with ``card`` written at (r, c)."""
        cells = list(self.grid)
        cells[self.index(r, c)] = card
        return Board(self.width, self.height, tuple(cells))

    def row_codes(self, r: int, empty: str = EMPTY_CODE) -> str:
        return ''.join(empty if card.is_empty else card.code
                       for card in self.grid[self.index(r, 0):self.index(r + 1, 0)])

    def pretty(self) -> str:
        """Generates the console rendering of the board, empty cells shown as '..'."""
        return '\n'.join(self.row_codes(r, EMPTY_DISPLAY) for r in range(self.height))
