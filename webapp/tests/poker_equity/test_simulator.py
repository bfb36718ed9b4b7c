"""
Unit tests for the Monte Carlo equity simulator

Randomised tests use a seeded random.Random so results are reproducible.
"""

import random
import unittest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from poker_equity.cards import parse_cards
from poker_equity.ranges import parse_range
from poker_equity.simulator import (
    simulate, simulate_in_batches, default_iterations, EquityResult, SimulationProgress
)


class TestSimulate(unittest.TestCase):
    """Test equity estimates and edge-case policies."""

    def test_aces_vs_kings_preflop(self):
        hole = parse_cards('As Ah')
        opp = parse_range('KK').combos
        eq = simulate(hole, [], opp, 2, 5000, rng=random.Random(42))
        self.assertGreater(eq.win, 0.70)
        self.assertLess(eq.win, 0.92)
        self.assertAlmostEqual(eq.win + eq.tie + eq.lose, 1.0, places=2)
        self.assertEqual(eq.iterations, 5000)

    def test_frequencies_sum_to_one(self):
        eq = simulate(parse_cards('Ah Kh'), [], parse_range('QQ').combos, 2, 3000,
                      rng=random.Random(1))
        self.assertAlmostEqual(eq.win + eq.tie + eq.lose, 1.0, places=9)

    def test_royal_flush_on_river_always_wins(self):
        hole = parse_cards('As Ks')
        board = parse_cards('Qs Js Ts 2h 3d')
        eq = simulate(hole, board, parse_range('AA').combos, 2, 1000, rng=random.Random(3))
        self.assertEqual(eq.win, 1.0)

    def test_board_plays_gives_tie(self):
        # Broadway straight on the board, nobody can beat or improve it
        hole = parse_cards('2c 3d')
        board = parse_cards('As Kh Qd Jc Ts')
        eq = simulate(hole, board, parse_range('44').combos, 2, 500, rng=random.Random(5))
        self.assertEqual(eq.tie, 1.0)

    def test_fully_blocked_range_counts_as_win(self):
        hole = parse_cards('As Ah')
        board = parse_cards('Ad 7c 2h')
        eq = simulate(hole, board, parse_range('AA').combos, 2, 200, rng=random.Random(0))
        self.assertEqual(eq.win, 1.0)
        self.assertEqual(eq.iterations, 200)

    def test_zero_iterations(self):
        eq = simulate(parse_cards('As Ah'), [], parse_range('KK').combos, 2, 0)
        self.assertEqual(eq, EquityResult())

    def test_same_seed_same_result(self):
        args = (parse_cards('Jh Th'), parse_cards('9h 8c 2d'), parse_range('AK, QQ+').combos, 3, 800)
        first = simulate(*args, rng=random.Random(11))
        second = simulate(*args, rng=random.Random(11))
        self.assertEqual(first, second)

    def test_extra_opponents_reduce_win_rate(self):
        hole = parse_cards('As Ah')
        opp = parse_range('KK').combos
        heads_up = simulate(hole, [], opp, 2, 3000, rng=random.Random(21))
        six_way = simulate(hole, [], opp, 6, 3000, rng=random.Random(21))
        self.assertLess(six_way.win, heads_up.win - 0.05)

    def test_full_ring_deals_without_running_out(self):
        eq = simulate(parse_cards('7c 2d'), [], parse_range('22+').combos, 9, 300,
                      rng=random.Random(8))
        self.assertAlmostEqual(eq.win + eq.tie + eq.lose, 1.0, places=9)

    def test_does_not_mutate_inputs(self):
        hole = parse_cards('As Ah')
        board = parse_cards('Kd 7c 2h')
        combos = parse_range('KK, QQ').combos
        snapshot = (list(hole), list(board), list(combos))
        simulate(hole, board, combos, 3, 200, rng=random.Random(4))
        self.assertEqual((hole, board, combos), snapshot)

    def test_equity_splits_ties(self):
        self.assertAlmostEqual(EquityResult(0.5, 0.2, 0.3, 10).equity, 0.6)


class TestSimulateInBatches(unittest.TestCase):
    """Test the batched runner used for progress reporting."""

    def setUp(self):
        self.hole = parse_cards('As Ah')
        self.opp = parse_range('KK').combos

    def test_progress_checkpoints(self):
        snapshots = list(simulate_in_batches(self.hole, [], self.opp, 2, 5000, 2000,
                                             rng=random.Random(9)))
        self.assertEqual([s.done for s in snapshots], [2000, 4000, 5000])
        self.assertTrue(all(s.total == 5000 for s in snapshots))
        self.assertEqual(snapshots[-1].partial.iterations, 5000)
        for s in snapshots:
            self.assertIsInstance(s, SimulationProgress)
            self.assertAlmostEqual(s.partial.win + s.partial.tie + s.partial.lose, 1.0)

    def test_final_batch_matches_single_call(self):
        batched = list(simulate_in_batches(self.hole, [], self.opp, 2, 3000, 700,
                                           rng=random.Random(13)))
        single = simulate(self.hole, [], self.opp, 2, 3000, rng=random.Random(13))
        self.assertEqual(batched[-1].partial, single)

    def test_zero_iterations_yields_nothing(self):
        self.assertEqual(list(simulate_in_batches(self.hole, [], self.opp, 2, 0)), [])

    def test_progress_to_dict(self):
        snapshot = next(simulate_in_batches(self.hole, [], self.opp, 2, 100, 50,
                                            rng=random.Random(2)))
        payload = snapshot.to_dict()
        self.assertEqual(payload['type'], 'progress')
        self.assertEqual(payload['done'], 50)
        self.assertEqual(payload['total'], 100)
        self.assertEqual(set(payload['partial']), {'win', 'tie', 'lose', 'iterations'})


class TestDefaultIterations(unittest.TestCase):

    def test_more_rollouts_on_later_streets(self):
        self.assertEqual(default_iterations([]), 25000)
        self.assertEqual(default_iterations([0, 1, 2]), 25000)
        self.assertEqual(default_iterations([0, 1, 2, 3]), 50000)
        self.assertEqual(default_iterations([0, 1, 2, 3, 4]), 50000)


if __name__ == '__main__':
    unittest.main()
