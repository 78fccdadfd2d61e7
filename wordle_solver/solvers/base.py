from __future__ import annotations

import enum
from typing import Dict, Optional, Type

from wordle_solver.engine import FrequencyTable, PairwiseLookup
from wordle_solver.engine.constraints import History

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


class SessionState(enum.Enum):
    NOT_STARTED = "not_started"
    OPENED = "opened"
    GUESSING = "guessing"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


TERMINAL_STATES = (SessionState.SOLVED, SessionState.EXHAUSTED)


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    One solver instance plays one game at a time.

    reset() starts a new session; next_guess() is called once per turn with
    the full history; finish() closes the session. A finished session must
    be reset before it is used again.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.table: Optional[FrequencyTable] = None
        self.lookup: Optional[PairwiseLookup] = None
        self.state = SessionState.NOT_STARTED

    def reset(self, *, table: FrequencyTable, lookup: Optional[PairwiseLookup] = None) -> None:
        self.table = table
        self.lookup = lookup
        self.state = SessionState.NOT_STARTED

    def finish(self, solved: bool) -> None:
        self.state = SessionState.SOLVED if solved else SessionState.EXHAUSTED

    def _check_active(self) -> None:
        if self.table is None:
            raise RuntimeError(f"{type(self).__name__}.reset() must be called before next_guess()")
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"session already {self.state.value}; call reset() for a new game")

    def next_guess(self, history: History) -> str:
        raise NotImplementedError("Override in subclass")
