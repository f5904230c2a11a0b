"""Core enumerations for the HP chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step (white moves toward row 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def back_rank(self) -> int:
        return 7 if self == Color.WHITE else 0

    @property
    def promotion_row(self) -> int:
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    CASTLE = 1
    EN_PASSANT = 2


class GameStatus(IntEnum):
    """Derived status of the side to move."""

    ACTIVE = 0
    CHECKMATE = 1
    STALEMATE = 2


class HealthBand(IntEnum):
    """Coarse HP bucket used when colouring health bars."""

    CRITICAL = 0
    WOUNDED = 1
    HEALTHY = 2
