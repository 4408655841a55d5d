"""
Game-loop primitives.

- AdvisorSession: one puzzle's state (candidate pool + constraint collection)
  driven round by round: recommend -> feedback -> record.
- run_case:  play one simulated game against a known answer.
- run_batch: play many simulated games in sequence.

These are UI-agnostic so the interactive advisor, the batch runner and the
tests all share the same loop.
"""

from __future__ import annotations
import enum
import logging
import time
from typing import Dict, Iterable, List, Optional, Tuple
from packages.engine import (
    CandidatePool, ConstraintCollection, EmptyPoolError, WORD_LENGTH,
    derive_constraints, is_solved, prune, score, validate_round,
)
from packages.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

# Wordle's own turn budget; simulations use it by default.
WORDLE_MAX_TURNS = 6


class SessionStatus(enum.Enum):
    ONGOING = "ongoing"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"  # pool pruned to empty


class AdvisorSession:
    """
    Owns the candidate pool and constraint collection for one puzzle.

    Example:
        s = AdvisorSession(words, seed=1)
        guess = s.recommend()
        status = s.record(guess, "WGGWG")
    """

    def __init__(self, words: Iterable[str], N: int = WORD_LENGTH,
                 solver: Optional[BaseSolver] = None, seed: int | None = None):
        self.N = int(N)
        self.pool = CandidatePool(words, self.N)
        self.constraints = ConstraintCollection()
        self.solver = solver if solver is not None else create_solver()
        self.solver.reset(N=self.N, seed=seed)
        self.history: List[Tuple[str, str]] = []
        self.status = SessionStatus.EXHAUSTED if self.pool.is_empty else SessionStatus.ONGOING

    @property
    def turns(self) -> int:
        """Number of guesses recorded so far."""
        return len(self.history)

    def recommend(self) -> str:
        """Next guess from the current pool; EmptyPoolError once exhausted."""
        if self.pool.is_empty:
            raise EmptyPoolError(
                "no dictionary word is consistent with the feedback so far")
        state = {
            "turn": self.turns + 1,
            "history": list(self.history),
            "candidates": self.pool,
            "N": self.N,
        }
        return self.solver.next_guess(state)

    def record(self, guess: str, feedback: str) -> SessionStatus:
        """
        Feed back the result of one guess.

        A malformed round raises MalformedInputError and leaves the session
        untouched.
        """
        guess, feedback = validate_round(guess, feedback, self.N)
        new_constraints = derive_constraints(guess, feedback, self.N)
        self.history.append((guess, feedback))

        if is_solved(feedback):
            log.info("solved in %d guesses", self.turns)
            self.status = SessionStatus.SOLVED
            return self.status

        prune(self.pool, new_constraints, self.constraints)

        if self.pool.is_empty:
            log.warning("no candidates left after %s -> %s", guess, feedback)
            self.status = SessionStatus.EXHAUSTED
        else:
            self.status = SessionStatus.ONGOING
        return self.status


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        words: Iterable[str],
        N: int = WORD_LENGTH,
        max_turns: int | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until solved, exhausted, or out of turns.

    Args:
        solver:     a BaseSolver (picks guesses from the pool)
        answer:     the hidden word; `score` plays the oracle
        words:      the dictionary the pool starts from
        N:          word length
        max_turns:  turn budget (None = unlimited)
        seed:       RNG seed for reproducible tie-breaks

    Returns:
        dict with keys:
            answer, success (bool), status, guesses (int), time_ms (float),
            history (list[(guess, feedback)])
    """
    session = AdvisorSession(words, N=N, solver=solver, seed=seed)
    answer = answer.strip().upper()

    t0 = time.perf_counter()
    while session.status is SessionStatus.ONGOING:
        if max_turns is not None and session.turns >= max_turns:
            break
        guess = session.recommend()
        session.record(guess, score(guess, answer))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "success": session.status is SessionStatus.SOLVED,
        "status": session.status.value,
        "guesses": session.turns,
        "time_ms": dt,
        "history": list(session.history),
    }


def run_batch(
        solver: BaseSolver,
        answers: Iterable[str],
        *,
        words: Iterable[str],
        N: int = WORD_LENGTH,
        max_turns: int | None = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back against the same dictionary.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    words = list(words)
    out: List[Dict] = []
    for idx, ans in enumerate(answers, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, words=words, N=N, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
