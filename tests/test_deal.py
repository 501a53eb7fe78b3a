import os
import tempfile
import unittest

from bark import (
    Card,
    DeckFormatError,
    Move,
    Phase,
    ShortDeckError,
    apply_move,
    deal_cards,
    load_deck,
    new_game,
    parse_deck_text,
)
from bark_core.deal import read_int

CODES = ['1A', '2B', '3C', '4D', '5E', '6F', '7G', '8H', '9I', '1J', '2K', '3L', '4M']


def deck_text(codes, declared=None):
    n = len(codes) if declared is None else declared
    return '\n'.join([str(n)] + list(codes)) + '\n'


class TestDeckParsing(unittest.TestCase):
    def test_given_valid_deck_text_when_parsing_then_cards_in_order(self):
        deck = parse_deck_text(deck_text(CODES[:4]), 'd.deck')
        self.assertEqual(len(deck), 4)
        self.assertEqual(deck.cards[0], Card(1, 'A'))
        self.assertEqual(deck.cards[3], Card(4, 'D'))
        self.assertEqual(deck.path, 'd.deck')

    def test_given_declared_length_longer_than_body_when_parsing_then_deck_format_error(self):
        with self.assertRaises(DeckFormatError):
            parse_deck_text(deck_text(CODES[:9], declared=10), 'd.deck')

    def test_given_malformed_decks_when_parsing_then_deck_format_error(self):
        bad = [
            '',
            deck_text(CODES[:3], declared=2),       # extra card lines
            deck_text([], declared=0),
            'x\n1A\n',
            '-1\n',
            deck_text(['1A', '0B']),
            deck_text(['1A', '1a']),
            deck_text(['1A', '1AB']),
            deck_text(['1A', '**']),
            '2\n1A\n\n',
        ]
        for text in bad:
            with self.assertRaises(DeckFormatError, msg=repr(text)):
                parse_deck_text(text, 'd.deck')

    def test_given_crlf_or_missing_final_newline_when_parsing_then_accepted(self):
        for text in ['2\r\n1A\r\n2B\r\n', '2\n1A\n2B']:
            deck = parse_deck_text(text, 'd.deck')
            self.assertEqual([c.code for c in deck.cards], ['1A', '2B'], repr(text))

    def test_given_signed_or_padded_numbers_when_reading_then_rejected(self):
        self.assertEqual(read_int('15'), 15)
        for text in ['+5', '-5', ' 5', '5 ', '', '5.0']:
            self.assertIsNone(read_int(text), text)

    def test_given_minimum_length_when_deck_shorter_then_deck_format_error(self):
        with self.assertRaises(DeckFormatError):
            parse_deck_text(deck_text(CODES[:11]), 'd.deck', min_length=12)
        deck = parse_deck_text(deck_text(CODES[:12]), 'd.deck', min_length=12)
        self.assertEqual(len(deck), 12)

    def test_given_deck_file_when_loading_then_parsed_and_missing_file_rejected(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, 'cards.deck')
            with open(path, 'w') as f:
                f.write(deck_text(CODES))
            deck = load_deck(path)
            self.assertEqual(len(deck), len(CODES))
            self.assertEqual(deck.path, path)
            with self.assertRaises(DeckFormatError):
                load_deck(os.path.join(d, 'missing.deck'))


class TestDealer(unittest.TestCase):
    def test_given_fresh_deck_when_new_game_then_six_and_five_cards_dealt(self):
        deck = parse_deck_text(deck_text(CODES), 'd.deck')
        state = new_game(deck, 4, 3)
        self.assertEqual(state.phase, Phase.NEW)
        self.assertTrue(state.board.is_empty())
        self.assertEqual(state.turn, 1)
        self.assertEqual(state.cards_drawn, 11)
        self.assertEqual([c.code for c in state.hand(1)], CODES[:6])
        self.assertEqual([c.code for c in state.hand(2)], CODES[6:11])

    def test_given_short_deck_when_new_game_then_short_deck_error(self):
        deck = parse_deck_text(deck_text(CODES[:10]), 'd.deck')
        with self.assertRaises(ShortDeckError):
            new_game(deck, 3, 3)

    def test_given_turn_passed_when_dealing_then_next_player_topped_up_to_six(self):
        deck = parse_deck_text(deck_text(CODES), 'd.deck')
        state = apply_move(new_game(deck, 3, 3), Move(slot=0, row=1, col=1))
        state = state.with_turn(2)
        dealt, ok = deal_cards(state)
        self.assertTrue(ok)
        self.assertEqual(dealt.cards_drawn, 12)
        self.assertEqual(len(dealt.hand(1)), 5)
        self.assertEqual(len(dealt.hand(2)), 6)
        self.assertEqual(dealt.hand(2)[-1], Card(3, 'L'))

    def test_given_exhausted_deck_when_dealing_then_failure_keeps_hands(self):
        deck = parse_deck_text(deck_text(CODES[:11]), 'd.deck')
        state = apply_move(new_game(deck, 3, 3), Move(slot=0, row=1, col=1)).with_turn(2)
        dealt, ok = deal_cards(state)
        self.assertFalse(ok)
        self.assertEqual(dealt.cards_drawn, 11)
        self.assertEqual(dealt.hands, state.hands)


if __name__ == '__main__':
    unittest.main(verbosity=2)
