"""Exception hierarchy shared by the models and the engine."""

from __future__ import annotations


class SichuanError(Exception):
    """Base class for every error raised by this package."""


class BoardFormatError(SichuanError, ValueError):
    """Board input is malformed (ragged rows, bad tokens, negative labels)."""


class PreconditionError(SichuanError):
    """The connectivity oracle was called with coordinates that do not hold
    a matching pair of tiles.

    This always means the caller's tile index and board disagree; it is a
    programming error, not a search outcome.
    """


class SolverStateError(SichuanError):
    """A solver result was requested before an answer was found."""


class GenerationError(SichuanError):
    """The board generator could not place every pair."""
