from __future__ import annotations

# Facade module that re-exports the bark core functionality.
# Single-responsibility modules live under bark_core/*.

from bark_core.board import Board, Card, Coord, EMPTY_CARD
from bark_core.state import Deck, GameState, Hand, Phase, HUMAN, MACHINE
from bark_core.errors import (
    BarkError,
    FatalError,
    ArgumentError,
    InvalidArgumentError,
    DeckFormatError,
    SaveFormatError,
    ShortDeckError,
    EndOfInputError,
    SaveWriteError,
)
from bark_core.deal import parse_deck_text, load_deck, deal_cards, new_game
from bark_core.moves import (
    Move,
    SaveRequest,
    wrap_step,
    neighbors,
    is_placeable,
    placeable_cells,
    parse_command,
    validate_move,
    apply_move,
    try_move,
)
from bark_core.ai import choose_move
from bark_core.scoring import calc_scores, longest_chain, scoring_player
from bark_core.savefile import encode_state, decode_state, save_game, load_game, is_valid_save_name
from bark_core.controller import run_game


def main() -> None:
    # CLI driver delegated to bark_core.cli
    from bark_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
