from __future__ import annotations
import random
from typing import Dict, Optional, Type

from wordler.engine import ConstraintModel

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}

# Precomputed offline for maximal expected information; never recomputed.
OPENING_WORD = "AROSE"


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver is bound to one ConstraintModel for one session. It only reads
    the model's candidates; the driver applies feedback to the model.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, model: ConstraintModel, seed: Optional[int] = None):
        self.model = model
        self.rng = random.Random(seed)

    def next_guess(self) -> Optional[str]:
        """
        Return the next guess (uppercase), or None when no candidates remain.
        """
        raise NotImplementedError("Override in subclass")
