"""
Unit tests for the card codec and card text parsing
"""

import unittest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from poker_equity.cards import (
    RANKS, SUITS, FULL_DECK,
    card_id, rank_of, suit_of, card_to_string, card_to_pretty,
    parse_card, parse_cards, cards_to_string
)


class TestCardCodec(unittest.TestCase):
    """Test the integer card encoding."""

    def test_encoding_is_rank_times_four_plus_suit(self):
        self.assertEqual(card_id(0, 0), 0)
        self.assertEqual(card_id(12, 0), 48)  # As
        self.assertEqual(card_id(12, 3), 51)  # Ac

    def test_rank_and_suit_round_trip_whole_deck(self):
        self.assertEqual(len(FULL_DECK), 52)
        for card in FULL_DECK:
            self.assertEqual(card_id(rank_of(card), suit_of(card)), card)

    def test_card_to_string(self):
        self.assertEqual(card_to_string(48), 'As')
        self.assertEqual(card_to_string(card_id(8, 2)), 'Td')
        self.assertEqual(card_to_string(card_id(0, 3)), '2c')

    def test_labels_are_unique(self):
        labels = {card_to_string(c) for c in FULL_DECK}
        self.assertEqual(len(labels), 52)

    def test_card_to_pretty(self):
        self.assertEqual(card_to_pretty(48), 'A♠')
        self.assertEqual(card_to_pretty(card_id(11, 1)), 'K♥')

    def test_rank_and_suit_orderings(self):
        self.assertEqual(RANKS, '23456789TJQKA')
        self.assertEqual(SUITS, 'shdc')


class TestCardParsing(unittest.TestCase):
    """Test text parsing used at the API boundary."""

    def test_parse_card_is_case_insensitive(self):
        self.assertEqual(parse_card('As'), 48)
        self.assertEqual(parse_card('as'), 48)
        self.assertEqual(parse_card('AS'), 48)
        self.assertEqual(parse_card(' Th '), card_id(8, 1))

    def test_parse_card_rejects_bad_input(self):
        for bad in ['', 'A', '10h', 'Xs', 'Ax', 'Asd']:
            with self.assertRaises(ValueError):
                parse_card(bad)
        with self.assertRaises(ValueError):
            parse_card(48)

    def test_parse_cards_formats(self):
        expected = [parse_card('As'), parse_card('Kd')]
        self.assertEqual(parse_cards('As Kd'), expected)
        self.assertEqual(parse_cards('As,Kd'), expected)
        self.assertEqual(parse_cards('AsKd'), expected)
        self.assertEqual(parse_cards(['As', 'Kd']), expected)

    def test_parse_cards_empty(self):
        self.assertEqual(parse_cards(''), [])
        self.assertEqual(parse_cards('   '), [])
        self.assertEqual(parse_cards(None), [])
        self.assertEqual(parse_cards([]), [])

    def test_parse_cards_rejects_other_types(self):
        for bad in [5, 4.5, {'card': 'As'}, True]:
            with self.assertRaises(ValueError):
                parse_cards(bad)
        with self.assertRaises(ValueError):
            parse_cards([48, 49])

    def test_parse_cards_odd_packed_length(self):
        with self.assertRaises(ValueError):
            parse_cards('AsK')

    def test_cards_to_string(self):
        self.assertEqual(cards_to_string(parse_cards('Qs Js Ts')), 'Qs Js Ts')


if __name__ == '__main__':
    unittest.main()
