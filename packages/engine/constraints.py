"""
Constraints implied by one round of feedback.

Given:
  - the guess that was played
  - the feedback received for it (G/Y/W, see validation.py)

Derive:
  - position constraints     : a letter must / must not sit at an index
  - letter-count constraints : a letter occurs at least / at most k times

Each constraint is a frozen value object, so equal constraints hash equally
and collapse in a set. The two kinds are kept in separate sets and never
mixed in one collection.

Double letters: for each distinct letter, k is the number of its copies that
were marked G or Y in this guess. Every G/Y copy yields "at least k"; every W
copy yields "at most k". A letter that is both confirmed and rejected in the
same guess therefore ends up pinned to exactly k copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Set, Tuple

from .errors import MalformedInputError
from .validation import ABSENT, EXACT, LETTERS, MISPLACED, WORD_LENGTH, validate_round


def _check_letter(letter: str) -> None:
    if not (isinstance(letter, str) and len(letter) == 1 and letter in LETTERS):
        raise MalformedInputError(f"letter must be one of A-Z: {letter!r}")


@dataclass(frozen=True)
class PositionConstraint:
    """word[index] == letter must equal must_match."""
    index: int
    letter: str
    must_match: bool

    def __post_init__(self):
        if self.index < 0:
            raise MalformedInputError(f"index must be non-negative: {self.index}")
        _check_letter(self.letter)

    def satisfies(self, word: str) -> bool:
        return (word[self.index] == self.letter) == self.must_match

    def __str__(self) -> str:
        if self.must_match:
            return f"Position {self.index} must be a {self.letter}."
        return f"Position {self.index} may not be {self.letter}."


@dataclass(frozen=True)
class LetterCountConstraint:
    """The word holds at least (is_minimum) or at most `count` copies of `letter`."""
    count: int
    letter: str
    is_minimum: bool

    def __post_init__(self):
        if self.count < 0:
            raise MalformedInputError(f"count must be non-negative: {self.count}")
        _check_letter(self.letter)

    def satisfies(self, word: str) -> bool:
        n = word.count(self.letter)
        if self.is_minimum:
            return n >= self.count
        return n <= self.count

    def __str__(self) -> str:
        bound = "at least" if self.is_minimum else "at most"
        noun = "copy" if self.count == 1 else "copies"
        return f"Word must contain {bound} {self.count} {noun} of {self.letter}."


# Result of deriving one round: (position constraints, letter-count constraints)
DerivedConstraints = Tuple[Set[PositionConstraint], Set[LetterCountConstraint]]


def derive_position_constraints(guess: str, feedback: str,
                                N: int = WORD_LENGTH) -> Set[PositionConstraint]:
    """
    G at i -> the guessed letter must be at i.
    Y at i -> the guessed letter is in the word, but not at i.
    W produces no position constraint on its own.
    """
    guess, feedback = validate_round(guess, feedback, N)
    out: Set[PositionConstraint] = set()
    for i, (ch, fb) in enumerate(zip(guess, feedback)):
        if fb == EXACT:
            out.add(PositionConstraint(i, ch, True))
        elif fb == MISPLACED:
            out.add(PositionConstraint(i, ch, False))
    return out


def derive_letter_count_constraints(guess: str, feedback: str,
                                    N: int = WORD_LENGTH) -> Set[LetterCountConstraint]:
    """
    Per distinct letter of the guess, bound how many copies the word holds.

    Example (SPEED, feedback WGGWW):
      E -> at least 1 (from the G) and at most 1 (from the W)
      P -> at least 1
      S, D -> at most 0
    """
    guess, feedback = validate_round(guess, feedback, N)
    out: Set[LetterCountConstraint] = set()
    for ch in set(guess):
        marks = [fb for g, fb in zip(guess, feedback) if g == ch]
        k = sum(1 for fb in marks if fb in (EXACT, MISPLACED))
        for fb in marks:
            out.add(LetterCountConstraint(k, ch, fb != ABSENT))
    return out


def derive_constraints(guess: str, feedback: str, N: int = WORD_LENGTH) -> DerivedConstraints:
    """Both kinds of constraint implied by one (guess, feedback) round."""
    # Validate once up front so a malformed round yields nothing at all
    guess, feedback = validate_round(guess, feedback, N)
    return (derive_position_constraints(guess, feedback, N),
            derive_letter_count_constraints(guess, feedback, N))
