from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, SessionState, register

from . import entropy  # noqa: F401
from .entropy import EntropyConfig, EntropySolver, best_opening

DEFAULT_SOLVER = "prune"


def create_solver(solver_id: str = DEFAULT_SOLVER) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
