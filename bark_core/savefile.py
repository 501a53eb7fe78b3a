from __future__ import annotations

from typing import Callable, List, Tuple

from .board import Board, Card
from .constants import HAND_SIZE, MAX_DIMENSION, MIN_DIMENSION, STARTING_CARDS, TURN_ONE, TURN_TWO
from .deal import load_deck, read_int
from .errors import SaveFormatError, SaveWriteError
from .logging_utils import get_logger
from .state import Deck, GameState, Hand, HUMAN, Phase

logger = get_logger(__name__)

HEADER_FIELDS = 4
# header + deck path + two hands
PREAMBLE_LINES = 4

DeckLoader = Callable[[str, int], Deck]


def encode_state(state: GameState) -> str:
    """
    Serializes a game to the save file layout:

        width height cards_drawn turn
        deck path
        player 1 hand
        player 2 hand
        one line per board row, '**' for an empty cell
    """
    board = state.board
    lines: List[str] = [
        f"{board.width} {board.height} {state.cards_drawn} {state.turn}",
        state.deck.path,
    ]
    for hand in state.hands:
        lines.append(''.join(card.code for card in hand))
    for r in range(board.height):
        lines.append(board.row_codes(r))
    return '\n'.join(lines) + '\n'


def _split_fields(line: str, count: int) -> List[str]:
    fields = line.split(' ')
    if len(fields) != count or any(f == '' for f in fields):
        raise SaveFormatError(f'header needs {count} fields separated by single spaces: {line!r}')
    return fields


def _parse_header(line: str) -> Tuple[int, int, int, int]:
    values = [read_int(f) for f in _split_fields(line, HEADER_FIELDS)]
    if any(v is None for v in values):
        raise SaveFormatError(f'non-numeric header: {line!r}')
    width, height, cards_drawn, turn = values
    for dim in (width, height):
        if dim < MIN_DIMENSION or dim > MAX_DIMENSION:
            raise SaveFormatError(f'board dimension {dim} out of range')
    if turn not in (TURN_ONE, TURN_TWO):
        raise SaveFormatError(f'bad turn {turn}')
    if cards_drawn < STARTING_CARDS:
        raise SaveFormatError(f'only {cards_drawn} cards drawn')
    return width, height, cards_drawn, turn


def _parse_cards(line: str, allow_empty: bool) -> List[Card]:
    cards: List[Card] = []
    for i in range(0, len(line), 2):
        card = Card.parse(line[i:i + 2], allow_empty=allow_empty)
        if card is None:
            raise SaveFormatError(f'bad card {line[i:i + 2]!r}')
        cards.append(card)
    return cards


def _parse_hand(line: str) -> Hand:
    if len(line) not in (2 * HAND_SIZE, 2 * (HAND_SIZE - 1)):
        raise SaveFormatError(f'hand must hold {HAND_SIZE - 1} or {HAND_SIZE} cards: {line!r}')
    return tuple(_parse_cards(line, allow_empty=False))


def _parse_board(lines: List[str], width: int) -> Board:
    rows: List[List[Card]] = []
    for line in lines:
        if len(line) != 2 * width:
            raise SaveFormatError(f'board row must be {2 * width} characters: {line!r}')
        rows.append(_parse_cards(line, allow_empty=True))
    return Board.from_rows(rows)


def decode_state(
    text: str,
    player_types: Tuple[str, str] = (HUMAN, HUMAN),
    deck_loader: DeckLoader = load_deck,
) -> GameState:
    """
    Rebuilds a game from save file text, reloading the deck it names.

    Any malformed field raises SaveFormatError (DeckFormatError for the
    deck itself). A completely full board is rejected as well.
    """
    lines = text.splitlines()
    if not lines:
        raise SaveFormatError('empty save file')
    width, height, cards_drawn, turn = _parse_header(lines[0])
    if len(lines) < 2:
        raise SaveFormatError('missing deck path')
    deck = deck_loader(lines[1], cards_drawn)
    if len(lines) != height + PREAMBLE_LINES:
        raise SaveFormatError(f'expected {height + PREAMBLE_LINES} lines, found {len(lines)}')
    hands = (_parse_hand(lines[2]), _parse_hand(lines[3]))
    board = _parse_board(lines[PREAMBLE_LINES:], width)
    if board.is_full():
        raise SaveFormatError('board is already full')
    return GameState(
        board=board,
        deck=deck,
        cards_drawn=cards_drawn,
        hands=hands,
        turn=turn,
        phase=Phase.NEW if board.is_empty() else Phase.MIDDLE,
        player_types=player_types,
    )


def is_valid_save_name(name: str) -> bool:
    """A save name needs at least one ASCII letter somewhere in it."""
    return any(('A' <= ch <= 'Z') or ('a' <= ch <= 'z') for ch in name)


def save_game(state: GameState, path: str) -> None:
    """Writes ``state`` to ``path``. Raises SaveWriteError when that is not possible."""
    if not is_valid_save_name(path):
        raise SaveWriteError(f'no letter in save name {path!r}')
    try:
        with open(path, 'w') as f:
            f.write(encode_state(state))
    except (OSError, ValueError) as exc:
        raise SaveWriteError(f'{path}: {exc}') from exc
    logger.debug('saved game to %s', path)


def load_game(
    path: str,
    player_types: Tuple[str, str] = (HUMAN, HUMAN),
    deck_loader: DeckLoader = load_deck,
) -> GameState:
    """Reads and decodes the save file at ``path``."""
    try:
        with open(path, 'r') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SaveFormatError(f'{path}: {exc}') from exc
    state = decode_state(text, player_types, deck_loader)
    logger.debug('loaded game from %s (turn %d, %d drawn)', path, state.turn, state.cards_drawn)
    return state
