"""
Hand Evaluator

Scores five-card hands as a single integer, category * 1e8 + tiebreak, so
hands compare with plain integer comparison. Also selects the best five-card
subset out of 5, 6 or 7 (or more) cards.

Inputs are never validated here: callers must pass distinct card ids.
"""

from collections import Counter
from itertools import combinations

HAND_NAMES = (
    'High Card', 'One Pair', 'Two Pair', 'Three of a Kind', 'Straight',
    'Flush', 'Full House', 'Four of a Kind', 'Straight Flush', 'Royal Flush',
)

HIGH_CARD = 0
ONE_PAIR = 1
TWO_PAIR = 2
THREE_OF_A_KIND = 3
STRAIGHT = 4
FLUSH = 5
FULL_HOUSE = 6
FOUR_OF_A_KIND = 7
STRAIGHT_FLUSH = 8
ROYAL_FLUSH = 9

CATEGORY_BASE = 100_000_000

ACE = 12
WHEEL_HIGH = 3  # rank index of the '5' in A-2-3-4-5

# Index tuples for every 5-card subset, built once at import
COMBOS_5 = tuple(combinations(range(5), 5))
COMBOS_6 = tuple(combinations(range(6), 5))
COMBOS_7 = tuple(combinations(range(7), 5))


def score5(c0, c1, c2, c3, c4):
    """
    Score exactly five distinct cards.

    Returns:
        int: category * 100_000_000 + tiebreak. Higher is better, equal is a tie.
    """
    flush = (c0 & 3) == (c1 & 3) == (c2 & 3) == (c3 & 3) == (c4 & 3)
    a, b, c, d, e = sorted((c0 >> 2, c1 >> 2, c2 >> 2, c3 >> 2, c4 >> 2), reverse=True)

    if a != b and b != c and c != d and d != e:
        if a - e == 4:
            straight_high = a
        elif a == ACE and b == 3:
            straight_high = WHEEL_HIGH
        else:
            straight_high = -1

        if straight_high >= 0:
            if flush:
                category = ROYAL_FLUSH if straight_high == ACE else STRAIGHT_FLUSH
            else:
                category = STRAIGHT
            return category * CATEGORY_BASE + straight_high

        tiebreak = (((a * 13 + b) * 13 + c) * 13 + d) * 13 + e
        return (FLUSH if flush else HIGH_CARD) * CATEGORY_BASE + tiebreak

    # Paired hands: a flush would need five distinct ranks
    groups = []
    count = 1
    prev = a
    for rank in (b, c, d, e):
        if rank == prev:
            count += 1
        else:
            groups.append((count, prev))
            count = 1
            prev = rank
    groups.append((count, prev))
    groups.sort(reverse=True)

    top = groups[0][0]
    second = groups[1][0]
    if top == 4:
        category = FOUR_OF_A_KIND
    elif top == 3:
        category = FULL_HOUSE if second == 2 else THREE_OF_A_KIND
    elif second == 2:
        category = TWO_PAIR
    else:
        category = ONE_PAIR

    tiebreak = 0
    for _, rank in groups:
        tiebreak = tiebreak * 13 + rank
    return category * CATEGORY_BASE + tiebreak


def score_five(cards):
    """
    Score a sequence of five cards.

    Generic counterpart of score5 built from rank counts; both must return
    the same integer for the same cards.
    """
    ranks = sorted((c >> 2 for c in cards), reverse=True)
    flush = len({c & 3 for c in cards}) == 1
    counts = Counter(ranks)
    groups = sorted(((n, r) for r, n in counts.items()), reverse=True)

    straight_high = None
    if len(groups) == 5:
        if ranks[0] - ranks[4] == 4:
            straight_high = ranks[0]
        elif ranks == [ACE, 3, 2, 1, 0]:
            straight_high = WHEEL_HIGH

    shape = [n for n, _ in groups]
    if flush and straight_high is not None:
        category = ROYAL_FLUSH if straight_high == ACE else STRAIGHT_FLUSH
    elif shape[0] == 4:
        category = FOUR_OF_A_KIND
    elif shape[:2] == [3, 2]:
        category = FULL_HOUSE
    elif flush:
        category = FLUSH
    elif straight_high is not None:
        category = STRAIGHT
    elif shape[0] == 3:
        category = THREE_OF_A_KIND
    elif shape[:2] == [2, 2]:
        category = TWO_PAIR
    elif shape[0] == 2:
        category = ONE_PAIR
    else:
        category = HIGH_CARD

    if straight_high is not None:
        tiebreak = straight_high
    else:
        tiebreak = 0
        for _, rank in groups:
            tiebreak = tiebreak * 13 + rank
    return category * CATEGORY_BASE + tiebreak


def best_hand(cards):
    """
    Best score over every 5-card subset of the given cards.

    Args:
        cards (list): 5, 6 or 7 distinct card ids (more is allowed but slower)

    Returns:
        int: Highest score5 value found, or -1 for fewer than 5 cards
    """
    n = len(cards)
    if n < 5:
        return -1
    if n == 5:
        return score5(cards[0], cards[1], cards[2], cards[3], cards[4])
    if n == 7:
        index_table = COMBOS_7
    elif n == 6:
        index_table = COMBOS_6
    else:
        return max(score5(*five) for five in combinations(cards, 5))

    best = -1
    for i, j, k, l, m in index_table:
        s = score5(cards[i], cards[j], cards[k], cards[l], cards[m])
        if s > best:
            best = s
    return best


def hand_category(score):
    return score // CATEGORY_BASE


def hand_name(score):
    return HAND_NAMES[max(0, min(hand_category(score), ROYAL_FLUSH))]
