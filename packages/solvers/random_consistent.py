"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline for batch comparisons; it does not try to maximize
    information gain.
"""

from __future__ import annotations

from typing import List
from packages.engine.errors import EmptyPoolPrecondition
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "2.0.0"

    def next_guess(self, state: dict) -> str:
        pool: List[str] = sorted(self.candidates(state))
        if not pool:
            raise EmptyPoolPrecondition("cannot pick a guess from an empty pool")
        return pool[self.rng.randrange(len(pool))]
