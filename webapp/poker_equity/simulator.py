"""
Equity Simulator

Monte Carlo rollouts of a hero hand against an opponent range, optionally
with extra random opponents. Each iteration draws one opponent combination,
completes the board from the remaining deck, deals the extra opponents and
compares the hero's best hand to the best competing hand.
"""

import logging
import random
from dataclasses import dataclass

from .cards import FULL_DECK
from .evaluator import best_hand
from .ranges import filter_combos

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 2000


@dataclass
class EquityResult:
    """Win/tie/lose frequencies over completed iterations."""
    win: float = 0.0
    tie: float = 0.0
    lose: float = 0.0
    iterations: int = 0

    @classmethod
    def from_counts(cls, wins, ties, losses):
        total = wins + ties + losses
        if total == 0:
            return cls()
        return cls(wins / total, ties / total, losses / total, total)

    @property
    def equity(self):
        """Pot share with ties split evenly."""
        return self.win + self.tie / 2

    def to_dict(self):
        return {
            'win': self.win,
            'tie': self.tie,
            'lose': self.lose,
            'iterations': self.iterations,
        }


@dataclass
class SimulationProgress:
    """Snapshot emitted after each batch of iterations."""
    done: int
    total: int
    partial: EquityResult

    def to_dict(self):
        return {
            'type': 'progress',
            'done': self.done,
            'total': self.total,
            'partial': self.partial.to_dict(),
        }


class _Rollout:
    """Per-call simulation state. Never shared between calls."""

    def __init__(self, hole, board, opponent_combos, num_players):
        self.hole = tuple(hole)
        self.board = tuple(board)
        known = set(self.hole) | set(self.board)
        self.available = [c for c in FULL_DECK if c not in known]
        self.candidates = filter_combos(opponent_combos, known)
        self.needed = 5 - len(self.board)
        self.extra_opponents = max(0, num_players - 2)
        self.wins = 0
        self.ties = 0
        self.losses = 0

    def run(self, iterations, rng):
        if not self.candidates:
            # Every opponent combination collides with known cards
            self.wins += iterations
            return

        hole = self.hole
        board = self.board
        needed = self.needed
        extra = self.extra_opponents
        deal_count = needed + 2 * extra
        candidates = self.candidates
        available = self.available

        for _ in range(iterations):
            o1, o2 = candidates[rng.randrange(len(candidates))]
            deck = [c for c in available if c != o1 and c != o2]
            dealt = rng.sample(deck, deal_count)

            full_board = board + tuple(dealt[:needed])
            hero_score = best_hand(hole + full_board)
            best_opp = best_hand((o1, o2) + full_board)

            idx = needed
            for _ in range(extra):
                extra_score = best_hand((dealt[idx], dealt[idx + 1]) + full_board)
                idx += 2
                if extra_score > best_opp:
                    best_opp = extra_score

            if hero_score > best_opp:
                self.wins += 1
            elif hero_score == best_opp:
                self.ties += 1
            else:
                self.losses += 1

    def result(self):
        return EquityResult.from_counts(self.wins, self.ties, self.losses)


def simulate(hole, board, opponent_combos, num_players=2, iterations=10000, rng=None):
    """
    Estimate win/tie/lose frequencies for a hero hand against a range.

    Args:
        hole (sequence): Hero's two hole cards
        board (sequence): 0-5 known community cards
        opponent_combos (list): (card, card) combinations for the primary opponent
        num_players (int): Total players including hero (2-9); players beyond
            the primary opponent receive random hands
        iterations (int): Number of rollouts
        rng (random.Random, optional): Random source; a fresh unseeded one by default

    Returns:
        EquityResult: Frequencies summing to 1 (all zero when iterations <= 0)

    Note:
        When no opponent combination survives the blockers, every iteration
        counts as a hero win.
    """
    if iterations <= 0:
        return EquityResult()
    rng = rng or random.Random()
    rollout = _Rollout(hole, board, opponent_combos, num_players)
    rollout.run(iterations, rng)
    return rollout.result()


def simulate_in_batches(hole, board, opponent_combos, num_players=2, iterations=10000,
                        batch_size=DEFAULT_BATCH_SIZE, rng=None):
    """
    Run the same simulation as simulate() in fixed-size batches.

    Yields a SimulationProgress after every batch; the final snapshot's
    partial result is the complete result. Stopping iteration early cancels
    the remaining work.
    """
    if iterations <= 0:
        return
    rng = rng or random.Random()
    batch_size = max(1, batch_size)
    rollout = _Rollout(hole, board, opponent_combos, num_players)
    done = 0
    while done < iterations:
        batch = min(batch_size, iterations - done)
        rollout.run(batch, rng)
        done += batch
        logger.debug(f"[SIM] Progress {done}/{iterations}")
        yield SimulationProgress(done, iterations, rollout.result())


def default_iterations(board):
    """Rollout count used when the caller does not choose one."""
    return 50000 if len(board) >= 4 else 25000
