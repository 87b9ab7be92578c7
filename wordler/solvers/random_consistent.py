"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).
  - If the candidate set is empty, report that with None.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline to compare the positional solver against; it does not
    try to maximize information gain or positional coverage, and it skips
    the fixed opening word.
"""

from __future__ import annotations

from typing import List, Optional
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.1.0"

    def next_guess(self) -> Optional[str]:
        """
        Pick any remaining candidate uniformly at random (seeded RNG).
        """
        self.model.first_guess = False
        pool: List[str] = list(self.model.remaining_candidates())
        if not pool:
            return None
        return pool[self.rng.randrange(len(pool))]
