"""
Experiment harness core primitives.

- run_case:  play a single game (one hidden answer) with a given solver.
- run_batch: play many games in sequence (optionally only the first K answers).

The turn budget defaults to 32 rather than the puzzle's native 6 so that hard
answers still produce a score instead of being cut off at 6.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

from wordle_solver.engine import FrequencyTable, Guess, PairwiseLookup, compute, validate_guess

log = logging.getLogger(__name__)

# Single source of truth for the turn budget.
MAX_TURNS = 32


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        table: FrequencyTable,
        lookup: Optional[PairwiseLookup] = None,
        max_turns: int = MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver (reset/next_guess/finish)
        answer:    the hidden word for this case
        table:     the shared dictionary; every guess must come from it
        lookup:    optional shared PairwiseLookup handed to the solver
        max_turns: turn budget (default 32)

    Returns:
        dict with keys:
            answer (str), success (bool), status ("solved" | "exhausted"),
            guesses (int turn index, or None when exhausted), time_ms (float),
            history (list[Guess]) of the failed guesses
    """
    _check_turns(max_turns)

    solver.reset(table=table, lookup=lookup)
    history: List[Guess] = []
    total_ms = 0.0

    for turn in range(1, max_turns + 1):
        t0 = time.perf_counter_ns()
        guess = solver.next_guess(history)
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        if guess == answer:
            solver.finish(solved=True)
            log.debug("solved %r in %d", answer, turn)
            return {
                "answer": answer, "success": True, "status": "solved",
                "guesses": turn, "time_ms": total_ms, "history": history,
            }

        if not validate_guess(guess, table):
            raise ValueError(f"solver {getattr(solver, 'id', solver)!r} guessed "
                             f"{guess!r}, which is not in the dictionary")

        history.append(Guess(guess, compute(answer, guess)))

    solver.finish(solved=False)
    log.info("failed to guess %r within %d turns", answer, max_turns)
    return {
        "answer": answer, "success": False, "status": "exhausted",
        "guesses": None, "time_ms": total_ms, "history": history,
    }


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        table: FrequencyTable,
        lookup: Optional[PairwiseLookup] = None,
        max_turns: int = MAX_TURNS,
        sample: Optional[int] = None,
        on_result: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given, only the first K
    answers are played. `on_result`, if given, is called with each result as
    soon as its game ends (progress output).

    The solver is reused across games, so a lookup it builds for `table` is
    built once per batch.
    """
    _check_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in pool:
        r = run_case(solver, ans, table=table, lookup=lookup, max_turns=max_turns)
        r["solver_id"] = getattr(solver, "id", "?")
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out
