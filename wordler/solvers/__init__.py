from __future__ import annotations
from typing import List, Optional
from wordler.engine import ConstraintModel
from .base import BaseSolver, OPENING_WORD, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import positional_freq  # noqa: F401
from .positional_freq import GuessSelector, PositionalFreqSolver, WordScore, format_scores

# The selector a session uses unless told otherwise.
DEFAULT_SOLVER = PositionalFreqSolver.id


def create_solver(solver_id: str, model: ConstraintModel, seed: Optional[int] = None) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id, bound to `model`.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(model, seed=seed)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
