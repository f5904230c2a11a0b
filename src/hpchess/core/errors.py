"""Rules-engine errors. All are raised before any state is mutated."""

from __future__ import annotations


class RulesError(ValueError):
    """Base class for recoverable rules-engine errors."""


class InvalidSquareError(RulesError):
    """Row or column outside 0..7."""


class NoPieceAtOriginError(RulesError):
    """The origin square of a move is empty."""


class IllegalMoveError(RulesError):
    """The requested move is not in the legal move list."""


class MoveInProgressError(RulesError):
    """A move is already being resolved."""
