"""
Exception types raised by the engine.

  - MalformedInputError   : bad guess/feedback (length, letters, symbols)
  - EmptyPoolError        : no dictionary word is consistent with the history
  - EmptyPoolPrecondition : a guess was requested from an empty pool
"""


class AdvisorError(Exception):
    """Base class for all advisor errors."""


class MalformedInputError(AdvisorError, ValueError):
    """A guess, feedback string or dictionary word is not well formed."""


class EmptyPoolError(AdvisorError):
    """
    The candidate pool has been pruned to nothing.

    Either the target word is outside the dictionary or the feedback entered
    was inconsistent. This ends the session; it is not retried.
    """


class EmptyPoolPrecondition(AdvisorError, AssertionError):
    """The scorer was called on an empty pool (caller must check first)."""
