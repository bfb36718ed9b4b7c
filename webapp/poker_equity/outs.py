"""
Outs Counter

Tests every unseen card against the current hand and counts the ones that
lift the best-hand category, keyed by the category they reach.
"""

from .cards import FULL_DECK
from .evaluator import HAND_NAMES, best_hand, hand_category


def calc_outs(hole, board):
    """
    Count improving cards by resulting category.

    Args:
        hole (sequence): Hero's two hole cards
        board (sequence): Known community cards (at least 3 for a 5+ card hand)

    Returns:
        dict: {category name: count}, only categories above the current one.
            Example: {'Flush': 9, 'Straight': 6}
    """
    cards = list(hole) + list(board)
    if len(cards) < 5:
        # No made five-card hand yet, so there is no category to improve on
        return {}
    known = set(cards)
    current = hand_category(best_hand(cards))
    result = {}
    for card in FULL_DECK:
        if card in known:
            continue
        category = hand_category(best_hand(cards + [card]))
        if category > current:
            name = HAND_NAMES[category]
            result[name] = result.get(name, 0) + 1
    return result


def total_outs(outs):
    return sum(outs.values())


def outs_report(hole, board):
    """
    Outs sorted by count, with the chance of hitting each on the next card.

    Returns:
        list: [(name, count, percent)] highest count first
    """
    outs = calc_outs(hole, board)
    unseen = 52 - len(hole) - len(board)
    report = [(name, count, count / unseen * 100) for name, count in outs.items()]
    report.sort(key=lambda item: item[1], reverse=True)
    return report
