from .errors import AdvisorError, MalformedInputError, EmptyPoolError, EmptyPoolPrecondition
from .validation import (
    WORD_LENGTH, EXACT, MISPLACED, ABSENT,
    normalize_word, normalize_feedback, validate_round, is_solved,
)
from .scoring import score
from .constraints import (
    PositionConstraint, LetterCountConstraint,
    derive_position_constraints, derive_letter_count_constraints, derive_constraints,
)
from .pool import CandidatePool
from .pruning import ConstraintCollection, prune

__all__ = [
    "AdvisorError", "MalformedInputError", "EmptyPoolError", "EmptyPoolPrecondition",
    "WORD_LENGTH", "EXACT", "MISPLACED", "ABSENT",
    "normalize_word", "normalize_feedback", "validate_round", "is_solved",
    "score",
    "PositionConstraint", "LetterCountConstraint",
    "derive_position_constraints", "derive_letter_count_constraints", "derive_constraints",
    "CandidatePool", "ConstraintCollection", "prune",
]
