from __future__ import annotations

from typing import List, Optional, Tuple

from .board import Board, Card
from .constants import HAND_SIZE, TURN_ONE
from .errors import DeckFormatError, ShortDeckError
from .logging_utils import get_logger
from .state import Deck, GameState, Hand, HUMAN, Phase

logger = get_logger(__name__)


def read_int(text: str) -> Optional[int]:
    """Parses a plain non-negative decimal integer, returning None for anything else."""
    # Signs and surrounding whitespace are rejected, so "+5" is not a number here.
    if not text or not text.isascii() or not text.isdigit():
        return None
    return int(text)


def parse_deck_text(text: str, path: str, min_length: int = 0) -> Deck:
    """
    Parses the contents of a deck file.

    The first line holds the deck length N, which must be positive and at
    least ``min_length``; exactly N card lines follow.
    """
    lines = text.splitlines()
    if not lines:
        raise DeckFormatError(f'{path}: empty deck file')
    length = read_int(lines[0])
    if length is None or length <= 0 or length < min_length:
        raise DeckFormatError(f'{path}: bad deck length {lines[0]!r}')
    body = lines[1:]
    if len(body) != length:
        raise DeckFormatError(f'{path}: expected {length} cards, found {len(body)}')
    cards: List[Card] = []
    for lineno, line in enumerate(body, start=2):
        card = Card.parse(line)
        if card is None:
            raise DeckFormatError(f'{path}:{lineno}: bad card {line!r}')
        cards.append(card)
    return Deck(cards=tuple(cards), path=path)


def load_deck(path: str, min_length: int = 0) -> Deck:
    """Reads and parses the deck file at ``path``."""
    try:
        with open(path, 'r') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DeckFormatError(f'{path}: {exc}') from exc
    deck = parse_deck_text(text, path, min_length)
    logger.debug('loaded %d cards from %s', len(deck), path)
    return deck


def hand_target(state: GameState, player: int) -> int:
    """The player on turn holds a full hand, the other one card fewer."""
    return HAND_SIZE if player == state.turn else HAND_SIZE - 1


def deal_cards(state: GameState) -> Tuple[GameState, bool]:
    """
    Tops up both hands from the deck, player 1 first.

    Returns the new state and whether every required card could be drawn.
    On failure the cards dealt before the deck ran out stay dealt.
    """
    hands: List[Hand] = [state.hands[0], state.hands[1]]
    drawn = state.cards_drawn
    ok = True
    for i in range(len(hands)):
        target = hand_target(state, i + 1)
        while len(hands[i]) < target:
            if drawn >= len(state.deck):
                ok = False
                break
            hands[i] = hands[i] + (state.deck.cards[drawn],)
            drawn += 1
        if not ok:
            break
    if drawn != state.cards_drawn:
        logger.debug('dealt %d card(s), %d of %d drawn', drawn - state.cards_drawn, drawn, len(state.deck))
    new_state = GameState(
        board=state.board,
        deck=state.deck,
        cards_drawn=drawn,
        hands=(hands[0], hands[1]),
        turn=state.turn,
        phase=state.phase,
        player_types=state.player_types,
    )
    return new_state, ok


def new_game(deck: Deck, width: int, height: int, player_types: Tuple[str, str] = (HUMAN, HUMAN)) -> GameState:
    """Creates a fresh game on an empty board and deals the starting hands."""
    state = GameState(
        board=Board.blank(width, height),
        deck=deck,
        cards_drawn=0,
        hands=((), ()),
        turn=TURN_ONE,
        phase=Phase.NEW,
        player_types=player_types,
    )
    state, ok = deal_cards(state)
    if not ok:
        raise ShortDeckError(f'{deck.path}: {len(deck)} cards cannot fill the starting hands')
    return state
