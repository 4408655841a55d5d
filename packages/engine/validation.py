"""
Input validation and normalization for guesses and feedback.

Conventions:
  - words are uppercase A-Z, length N (WORD_LENGTH by default)
  - feedback uses one symbol per position:
      'G' : EXACT      = correct letter in the correct position
      'Y' : MISPLACED  = letter present elsewhere in the word
      'W' : ABSENT     = letter not present (beyond the G/Y copies of it)
  - lowercase input is accepted and upper-cased; '-' is accepted for 'W'

Everything that crosses into the engine from the outside passes through
normalize_word / normalize_feedback, which raise MalformedInputError.
"""

from typing import Optional, Tuple

from .errors import MalformedInputError

WORD_LENGTH = 5
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

EXACT = "G"
MISPLACED = "Y"
ABSENT = "W"
FEEDBACK_SYMBOLS = (EXACT, MISPLACED, ABSENT)

# Accepted spellings of the ABSENT symbol
_ABSENT_ALIASES = {"-": ABSENT}


def normalize_word(word: str, N: Optional[int] = None) -> str:
    """
    Strip and upper-case `word`, then check it is made only of A-Z.

    If N is given the length must match as well.
    """
    if not isinstance(word, str):
        raise MalformedInputError(f"word must be a string, not {type(word).__name__}")
    # Check before upper-casing: "ß".upper() is "SS"
    raw = word.strip()
    if not raw or not (raw.isascii() and raw.isalpha()):
        raise MalformedInputError(f"word must contain only letters A-Z: {word!r}")
    w = raw.upper()
    if N is not None and len(w) != N:
        raise MalformedInputError(f"word must have {N} letters: {word!r}")
    return w


def normalize_feedback(feedback: str, N: Optional[int] = None) -> str:
    """
    Strip and upper-case `feedback`, map aliases, and check every symbol.

    Example: normalize_feedback("gy-wG") -> "GYWWG"
    """
    if not isinstance(feedback, str):
        raise MalformedInputError(f"feedback must be a string, not {type(feedback).__name__}")
    f = "".join(_ABSENT_ALIASES.get(c, c) for c in feedback.strip().upper())
    if not f or any(c not in FEEDBACK_SYMBOLS for c in f):
        raise MalformedInputError(
            f"feedback must use only {'/'.join(FEEDBACK_SYMBOLS)}: {feedback!r}")
    if N is not None and len(f) != N:
        raise MalformedInputError(f"feedback must have {N} symbols: {feedback!r}")
    return f


def validate_round(guess: str, feedback: str, N: Optional[int] = None) -> Tuple[str, str]:
    """
    Normalize one (guess, feedback) pair and check the two agree in length.

    Returns the normalized pair; raises MalformedInputError otherwise.
    """
    g = normalize_word(guess, N)
    f = normalize_feedback(feedback, N)
    if len(g) != len(f):
        raise MalformedInputError(
            f"guess {g!r} and feedback {f!r} differ in length ({len(g)} != {len(f)})")
    return g, f


def is_solved(feedback: str) -> bool:
    """All positions EXACT."""
    return bool(feedback) and all(c == EXACT for c in feedback)
