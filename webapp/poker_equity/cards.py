"""
Card Codec

Cards are plain integers in [0, 52): rank * 4 + suit.
Rank 0-12 maps to '2'..'A', suit 0-3 maps to spade, heart, diamond, club.
"""

import re

RANKS = '23456789TJQKA'
SUITS = 'shdc'
SUIT_SYMBOLS = {'s': '♠', 'h': '♥', 'd': '♦', 'c': '♣'}

FULL_DECK = tuple(range(52))

_SEPARATORS = re.compile(r'[\s,]+')


def card_id(rank, suit):
    return rank * 4 + suit


def rank_of(card):
    return card >> 2


def suit_of(card):
    return card & 3


def card_to_string(card):
    """Two-character label, e.g. 'As' or 'Td'."""
    return RANKS[card >> 2] + SUITS[card & 3]


def card_to_pretty(card):
    """Rank plus suit pip, e.g. 'A♠'."""
    return RANKS[card >> 2] + SUIT_SYMBOLS[SUITS[card & 3]]


def parse_card(text):
    """
    Parse a card label such as 'As', 'kd' or 'TH' into a card id.

    Args:
        text (str): Rank character followed by suit character

    Returns:
        int: Card id in [0, 52)

    Raises:
        ValueError: If the text is not a valid two-character card
    """
    if not isinstance(text, str):
        raise ValueError(f"Card must be a string, got {type(text).__name__}")
    label = text.strip()
    if len(label) != 2:
        raise ValueError(f"Card must be exactly 2 chars (e.g. 'Ah'): {text!r}")
    rank = RANKS.find(label[0].upper())
    suit = SUITS.find(label[1].lower())
    if rank < 0:
        raise ValueError(f"Invalid rank character: {label[0]!r}")
    if suit < 0:
        raise ValueError(f"Invalid suit: {label[1]!r}")
    return card_id(rank, suit)


def parse_cards(text):
    """
    Parse several cards from a string or a list of labels.

    Accepts 'As Kd', 'As,Kd', packed 'AsKd', or ['As', 'Kd']. None gives [].

    Raises:
        ValueError: On any malformed card or an unsupported input type
    """
    if isinstance(text, (list, tuple)):
        return [parse_card(label) for label in text]
    if text is not None and not isinstance(text, str):
        raise ValueError(f"Cards must be a string or a list of labels, got {type(text).__name__}")
    text = (text or '').strip()
    if not text:
        return []
    parts = [p for p in _SEPARATORS.split(text) if p]
    if len(parts) == 1 and len(parts[0]) > 2:
        packed = parts[0]
        if len(packed) % 2 != 0:
            raise ValueError(f"Packed card string length must be a multiple of 2: {packed!r}")
        parts = [packed[i:i + 2] for i in range(0, len(packed), 2)]
    return [parse_card(part) for part in parts]


def cards_to_string(cards):
    return ' '.join(card_to_string(c) for c in cards)
