"""
Spot analysis: the full result shown for one calculation.

Bundles equity, the hero's current made hand and outs into one payload.
"""

import logging
import time

from .evaluator import best_hand, hand_name
from .outs import calc_outs
from .ranges import filter_combos
from .simulator import simulate, simulate_in_batches, DEFAULT_BATCH_SIZE

logger = logging.getLogger(__name__)

STREET_NAMES = {0: 'Pre-flop', 3: 'Flop', 4: 'Turn', 5: 'River'}


def street_name(board):
    n = len(board)
    key = (5 if n >= 5 else n) if n >= 3 else 0
    return STREET_NAMES[key]


def current_hand_name(hole, board):
    cards = list(hole) + list(board)
    if len(cards) < 5:
        return '(incomplete board)'
    return hand_name(best_hand(cards))


def _summary(hole, board, opponent_combos, equity):
    return {
        'type': 'result',
        'eq': equity.to_dict(),
        'my_hand_name': current_hand_name(hole, board),
        'street': street_name(board),
        'outs': calc_outs(hole, board) if 0 < len(board) < 5 else {},
        'iterations': equity.iterations,
        'opponent_combos': len(filter_combos(opponent_combos, list(hole) + list(board))),
    }


def analyze_spot(hole, board, opponent_combos, num_players=2, iterations=10000, rng=None):
    """
    Run the equity simulation and describe the hero's hand.

    Args:
        hole (list): Hero hole card ids
        board (list): Community card ids
        opponent_combos (list): Opponent (card, card) combinations
        num_players (int): Players including hero
        iterations (int): Rollouts
        rng (random.Random, optional): Random source

    Returns:
        dict: {
            'type': 'result',
            'eq': {'win', 'tie', 'lose', 'iterations'},
            'my_hand_name': str,
            'street': str,
            'outs': {category name: count},
            'iterations': int,
            'opponent_combos': int   # combos left after removing blockers
        }
    """
    start_time = time.time()
    equity = simulate(hole, board, opponent_combos, num_players, iterations, rng)
    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(f"[ANALYSIS] {iterations} rollouts, {num_players} players, "
                f"{len(opponent_combos)} combos in {elapsed_ms:.0f}ms")
    return _summary(hole, board, opponent_combos, equity)


def analyze_spot_stream(hole, board, opponent_combos, num_players=2, iterations=10000,
                        batch_size=DEFAULT_BATCH_SIZE, rng=None):
    """
    Same as analyze_spot, but yields progress dicts before the final result.

    Yields:
        dict: {'type': 'progress', 'done', 'total', 'partial'} per batch,
            then the analyze_spot result dict
    """
    last = None
    for progress in simulate_in_batches(hole, board, opponent_combos, num_players,
                                        iterations, batch_size, rng):
        last = progress
        yield progress.to_dict()
    if last is None:
        equity = simulate(hole, board, opponent_combos, num_players, 0)
    else:
        equity = last.partial
    yield _summary(hole, board, opponent_combos, equity)
