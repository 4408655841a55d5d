"""
Letter-Frequency Solver (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidate pool (already pruned
    by past feedback), counting repeated letters within a word every time.
  - Score each candidate as the sum of its DISTINCT letters' frequencies.
  - Pick the max; break ties uniformly at random with the solver RNG.

This is a greedy one-step heuristic. Words built from common letters tend to
split the remaining pool more evenly, but the pick is not guaranteed to be
the most informative one.
"""

from __future__ import annotations
import random
from collections import Counter
from typing import Iterable, List, Optional
from packages.engine.errors import EmptyPoolPrecondition
from .base import BaseSolver, register


def letter_frequencies(words: Iterable[str]) -> Counter:
    """Occurrences of every letter across `words` (repeats counted)."""
    return Counter("".join(words))


def score_word(word: str, freq: Counter) -> int:
    """
    Sum letter frequencies but count each letter at most once per word
    (prefer 'SLATE' over 'SLEET' when counts are similar).
    """
    return sum(freq[ch] for ch in set(word))


def best_words(words: Iterable[str]) -> List[str]:
    """All words sharing the maximal score, sorted."""
    words = list(words)
    freq = letter_frequencies(words)

    best_score = None
    best: List[str] = []
    for w in words:
        s = score_word(w, freq)
        if best_score is None or s > best_score:
            best_score = s
            best = [w]
        elif s == best_score:
            best.append(w)
    return sorted(best)


def recommend_guess(pool: Iterable[str], rng: Optional[random.Random] = None) -> str:
    """
    Recommend the next guess from a non-empty candidate pool.

    The pool is only read. Raises EmptyPoolPrecondition if it is empty.
    """
    best = best_words(pool)
    if not best:
        raise EmptyPoolPrecondition("cannot recommend a guess from an empty pool")
    if rng is None:
        rng = random.Random()
    # Sorted tie list + injected RNG: same seed -> same pick
    return best[rng.randrange(len(best))]


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "2.0.0"

    def next_guess(self, state: dict) -> str:
        return recommend_guess(self.candidates(state), self.rng)
