from __future__ import annotations

from .constants import (
    EXIT_BAD_ARGS,
    EXIT_DECK_READ,
    EXIT_END_HUMAN_INPUT,
    EXIT_PLAYER_INVALID,
    EXIT_SAVE_READ,
    EXIT_SHORT_DECK,
)


class BarkError(Exception):
    """Base exception for bark game errors."""


class FatalError(BarkError):
    """An error that ends the process with ``exit_code`` after printing ``message``."""

    exit_code = 1
    message = 'Fatal error'

    def __init__(self, detail: str = ''):
        self.detail = detail
        super().__init__(detail or self.message)


class ArgumentError(FatalError):
    exit_code = EXIT_BAD_ARGS
    message = 'Usage: bark savefile p1type p2type\nbark deck width height p1type p2type'


class InvalidArgumentError(ArgumentError):
    """A player type or board dimension argument is out of range."""

    exit_code = EXIT_PLAYER_INVALID
    message = 'Incorrect arg types'


class DeckFormatError(FatalError):
    exit_code = EXIT_DECK_READ
    message = 'Unable to parse deckfile'


class SaveFormatError(FatalError):
    exit_code = EXIT_SAVE_READ
    message = 'Unable to parse savefile'


class ShortDeckError(FatalError):
    exit_code = EXIT_SHORT_DECK
    message = 'Short deck'


class EndOfInputError(FatalError):
    exit_code = EXIT_END_HUMAN_INPUT
    message = 'End of input'


class SaveWriteError(BarkError):
    """Raised when a save request cannot be honoured. The game carries on."""

    message = 'Unable to save'
