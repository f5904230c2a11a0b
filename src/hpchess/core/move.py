"""Move value object, relative to an implicit origin square."""

from __future__ import annotations

from dataclasses import dataclass

from hpchess.core.enums import MoveFlag
from hpchess.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable destination plus special-move bookkeeping.

    ``rook_from`` / ``rook_to`` are only set for :attr:`MoveFlag.CASTLE`.
    """

    target: Square
    flag: MoveFlag = MoveFlag.NORMAL
    rook_from: Square | None = None
    rook_to: Square | None = None

    @property
    def is_castle(self) -> bool:
        return self.flag == MoveFlag.CASTLE

    @property
    def is_en_passant(self) -> bool:
        return self.flag == MoveFlag.EN_PASSANT

    def __str__(self) -> str:
        base = square_name(self.target)
        if self.flag == MoveFlag.CASTLE:
            return f"{base} (castle)"
        if self.flag == MoveFlag.EN_PASSANT:
            return f"{base} (e.p.)"
        return base
