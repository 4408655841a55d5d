"""
Constraint bookkeeping and candidate pruning.

A ConstraintCollection tracks two groups of constraints per kind:
  - finished : already applied; every word left in the pool satisfies them
  - pending  : derived this round and not yet checked against the pool

offer() drops anything already finished, so a constraint re-derived in a
later round never causes a second scan. apply_pending() checks all pending
constraints in one pass (the conjunction does not depend on order), removes
failing words, then retires the pending constraints to finished.

An empty pool after pruning is a legitimate end of the session (the word is
not in the dictionary, or the feedback was inconsistent); it is reported by
the caller, not raised here.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional, Union

from .constraints import DerivedConstraints, LetterCountConstraint, PositionConstraint
from .errors import MalformedInputError
from .pool import CandidatePool

log = logging.getLogger(__name__)

Constraint = Union[PositionConstraint, LetterCountConstraint]


def _check_fits(positions: Iterable[PositionConstraint], N: int) -> None:
    too_far = sorted((c for c in positions if c.index >= N), key=str)
    if too_far:
        raise MalformedInputError(f"{too_far[0]} does not fit {N}-letter words")


class ConstraintCollection:

    def __init__(self):
        self._finished_positions = set()
        self._finished_counts = set()
        self._pending_positions = set()
        self._pending_counts = set()

    # ---- read-only views ----

    @property
    def finished_positions(self) -> FrozenSet[PositionConstraint]:
        return frozenset(self._finished_positions)

    @property
    def finished_counts(self) -> FrozenSet[LetterCountConstraint]:
        return frozenset(self._finished_counts)

    @property
    def pending_positions(self) -> FrozenSet[PositionConstraint]:
        return frozenset(self._pending_positions)

    @property
    def pending_counts(self) -> FrozenSet[LetterCountConstraint]:
        return frozenset(self._pending_counts)

    @property
    def has_pending(self) -> bool:
        return bool(self._pending_positions or self._pending_counts)

    # ---- mutation ----

    def offer(self, constraint: Constraint) -> bool:
        """
        Queue `constraint` unless it is already finished.

        Returns True if it was newly added to the pending set.
        """
        if isinstance(constraint, PositionConstraint):
            finished, pending = self._finished_positions, self._pending_positions
        elif isinstance(constraint, LetterCountConstraint):
            finished, pending = self._finished_counts, self._pending_counts
        else:
            raise TypeError(f"not a constraint: {constraint!r}")

        if constraint in finished or constraint in pending:
            return False
        pending.add(constraint)
        log.debug("pending: %s", constraint)
        return True

    def offer_all(self, constraints: Iterable[Constraint]) -> int:
        """Offer each constraint; returns how many were newly queued."""
        return sum(1 for c in constraints if self.offer(c))

    def _first_failure(self, word: str) -> Optional[Constraint]:
        for c in self._pending_positions:
            if not c.satisfies(word):
                return c
        for c in self._pending_counts:
            if not c.satisfies(word):
                return c
        return None

    def apply_pending(self, pool: CandidatePool) -> List[str]:
        """
        Remove every word failing at least one pending constraint, then move
        all pending constraints into the finished sets.

        Returns the removed words.
        """
        _check_fits(self._pending_positions, pool.N)

        before = len(pool)
        removed = pool.discard_failing(lambda w: self._first_failure(w) is None)

        if log.isEnabledFor(logging.DEBUG):
            for w in removed:
                log.debug("throwing out %s because of %s", w, self._first_failure(w))

        self._finished_positions |= self._pending_positions
        self._finished_counts |= self._pending_counts
        self._pending_positions.clear()
        self._pending_counts.clear()

        log.info("pruned pool %d -> %d words", before, len(pool))
        return removed


def prune(pool: CandidatePool, new_constraints: DerivedConstraints,
          collection: Optional[ConstraintCollection] = None) -> CandidatePool:
    """
    Apply one round of derived constraints to `pool` (in place) and return it.

    Pass the session's `collection` so that constraints finished in earlier
    rounds are skipped; without one, a fresh collection is used.
    """
    if collection is None:
        collection = ConstraintCollection()
    positions, counts = new_constraints
    # Reject before queueing anything, so `collection` stays clean
    _check_fits(positions, pool.N)
    collection.offer_all(positions)
    collection.offer_all(counts)
    collection.apply_pending(pool)
    return pool
