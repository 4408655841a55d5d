from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


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
    A solver picks the next guess from the current candidate pool.

    Randomness goes through `self.rng` only, so a seed passed to reset()
    makes every choice reproducible.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.rng = random.Random()

    def reset(self, *, N: int, seed: int | None = None) -> None:
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        """
        `state` carries at least:
          - "candidates": the CandidatePool (or any iterable of words)
          - "turn", "history", "N"
        """
        raise NotImplementedError("Override in subclass")

    def candidates(self, state: dict) -> List[str]:
        return list(state["candidates"])
