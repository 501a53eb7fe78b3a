from __future__ import annotations

import sys
from typing import Optional, TextIO, Tuple

from .ai import choose_move
from .deal import deal_cards
from .errors import EndOfInputError, SaveWriteError
from .logging_utils import get_logger
from .moves import Move, SaveRequest, apply_move, parse_command, try_move
from .savefile import save_game
from .scoring import calc_scores
from .state import GameState, Phase

logger = get_logger(__name__)


def render_hand(state: GameState) -> str:
    """Hand line for the player on turn; humans also see their player number."""
    label = 'Hand' if state.is_machine(state.turn) else f'Hand({state.turn})'
    cards = ''.join(f' {card}' for card in state.current_hand())
    return f'{label}:{cards}'


def render_scores(scores: Tuple[int, int]) -> str:
    return f'Player 1={scores[0]} Player 2={scores[1]}'


def machine_turn(state: GameState, out: TextIO) -> GameState:
    move = choose_move(state)
    card = state.current_hand()[move.slot]
    state_after = apply_move(state, move)
    print(f'Player {state.turn} plays {card} in column {move.col + 1} row {move.row + 1}', file=out)
    return state_after


def human_turn(state: GameState, inp: TextIO, out: TextIO) -> GameState:
    """Prompts until a legal move arrives. Save requests are served without ending the turn."""
    while True:
        print('Move? ', end='', file=out, flush=True)
        line = inp.readline()
        if line == '':
            raise EndOfInputError('input closed while waiting for a move')
        command = parse_command(line.rstrip('\r\n'))
        if isinstance(command, SaveRequest):
            try:
                save_game(state, command.path)
            except SaveWriteError as exc:
                logger.info('save rejected: %s', exc)
                print(SaveWriteError.message, file=out)
            continue
        if isinstance(command, Move):
            state_after = try_move(state, command)
            if state_after is not None:
                return state_after
        logger.debug('rejected input %r', line)


def play_turn(state: GameState, inp: TextIO, out: TextIO) -> GameState:
    print(render_hand(state), file=out)
    if state.is_machine(state.turn):
        return machine_turn(state, out)
    return human_turn(state, inp, out)


def run_game(state: GameState, inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> Tuple[int, int]:
    """
    Plays ``state`` to the end and returns the final scores.

    Each round deals cards, shows the board, lets the player on turn move
    and passes the turn. The game stops when the board is full or the deck
    cannot refill the hands.
    """
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while state.phase != Phase.END:
        if state.board.is_full():
            state = state.ended()
            break
        state, ok = deal_cards(state)
        if not ok:
            logger.debug('deck exhausted after %d cards', state.cards_drawn)
            state = state.ended()
            break
        print(state.board.pretty(), file=out)
        state = play_turn(state, inp, out)
        state = state.with_turn(state.other_player())
    print(state.board.pretty(), file=out)
    scores = calc_scores(state.board)
    print(render_scores(scores), file=out)
    return scores
