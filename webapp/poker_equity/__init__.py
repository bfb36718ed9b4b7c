"""
Poker Equity Engine

Card encoding, hand evaluation, range expansion, Monte Carlo equity and
outs counting for Texas Hold'em.
"""

from .cards import card_id, rank_of, suit_of, card_to_string, parse_card, parse_cards
from .evaluator import score5, score_five, best_hand, hand_category, hand_name, HAND_NAMES
from .ranges import (
    parse_range, filter_combos, combos_from_grid, grid_from_combos, grid_cells,
    preset_range, RANGE_PRESETS,
)
from .simulator import simulate, simulate_in_batches, EquityResult
from .outs import calc_outs, outs_report
from .analysis import analyze_spot, analyze_spot_stream

__all__ = [
    'card_id', 'rank_of', 'suit_of', 'card_to_string', 'parse_card', 'parse_cards',
    'score5', 'score_five', 'best_hand', 'hand_category', 'hand_name', 'HAND_NAMES',
    'parse_range', 'filter_combos', 'combos_from_grid', 'grid_from_combos', 'grid_cells',
    'preset_range', 'RANGE_PRESETS',
    'simulate', 'simulate_in_batches', 'EquityResult',
    'calc_outs', 'outs_report',
    'analyze_spot', 'analyze_spot_stream',
]
