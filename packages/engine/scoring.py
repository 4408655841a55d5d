"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

This is the simulated oracle: it plays the part of the human who reports
feedback, so that games can be run end to end without a person.

Conventions (see validation.py):
  - 'G' : correct letter in the correct position
  - 'Y' : correct letter in the wrong position
  - 'W' : letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from collections import Counter

from .errors import MalformedInputError
from .validation import ABSENT, EXACT, MISPLACED, normalize_word


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Examples:
      score("BELLE", "LEVEL") -> "WGYYY"
      score("LEMON", "LEVEL") -> "GGWWW"
    """
    guess = normalize_word(guess)
    answer = normalize_word(answer)
    if len(guess) != len(answer):
        raise MalformedInputError(
            f"guess and answer must be the same length: {guess!r}, {answer!r}")

    pattern = [ABSENT] * len(guess)

    # Pass 1: greens, and leftover counts from the answer for pass 2
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = EXACT
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's true multiplicity
    for i, g in enumerate(guess):
        if pattern[i] == EXACT:
            continue
        if remaining[g] > 0:
            pattern[i] = MISPLACED
            remaining[g] -= 1

    return "".join(pattern)
