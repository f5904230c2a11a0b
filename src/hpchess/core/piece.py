"""Piece value object with hit points."""

from __future__ import annotations

from dataclasses import dataclass, replace

from hpchess.core.enums import Color, HealthBand, PieceType

MAX_HP: dict[PieceType, int] = {
    PieceType.PAWN: 2,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 4,
    PieceType.QUEEN: 5,
    PieceType.KING: 7,
}

DAMAGE: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 2,
    PieceType.BISHOP: 2,
    PieceType.ROOK: 3,
    PieceType.QUEEN: 3,
    PieceType.KING: 2,
}

_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece state.

    ``hp`` and ``max_hp`` default to the kind's maximum when omitted, so
    ``Piece(Color.WHITE, PieceType.ROOK)`` is a fresh rook with 4/4 HP.
    Every state change returns a new value; boards never share mutable pieces.
    """

    color: Color
    piece_type: PieceType
    hp: int | None = None
    max_hp: int | None = None
    has_moved: bool = False

    def __post_init__(self) -> None:
        if self.max_hp is None:
            object.__setattr__(self, "max_hp", MAX_HP[self.piece_type])
        if self.hp is None:
            object.__setattr__(self, "hp", self.max_hp)
        if self.hp > self.max_hp:
            kind = self.piece_type.name.lower()
            raise ValueError(f"{kind} hp {self.hp} exceeds max {self.max_hp}")

    # ── Combat ───────────────────────────────────────────────────────────

    @property
    def damage(self) -> int:
        """Damage this piece deals when it attacks."""
        return DAMAGE[self.piece_type]

    def hp_after(self, damage: int) -> int:
        """Remaining HP after taking *damage*, floored at zero."""
        return max(0, self.hp - damage)

    def with_damage(self, damage: int) -> Piece:
        """Copy with *damage* applied. Callers remove the piece at 0 HP."""
        return replace(self, hp=self.hp_after(damage))

    # ── Movement bookkeeping ─────────────────────────────────────────────

    def moved(self) -> Piece:
        return replace(self, has_moved=True)

    def promoted(self, piece_type: PieceType = PieceType.QUEEN) -> Piece:
        """Copy as *piece_type*; HP is capped at the new maximum, never raised."""
        new_max = MAX_HP[piece_type]
        return replace(
            self,
            piece_type=piece_type,
            max_hp=new_max,
            hp=min(self.hp, new_max),
        )

    # ── Display helpers ──────────────────────────────────────────────────

    @property
    def hp_ratio(self) -> float:
        return max(0.0, min(1.0, self.hp / self.max_hp))

    @property
    def health_band(self) -> HealthBand:
        ratio = self.hp_ratio
        if ratio > 0.6:
            return HealthBand.HEALTHY
        if ratio > 0.3:
            return HealthBand.WOUNDED
        return HealthBand.CRITICAL

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    def __str__(self) -> str:
        """One-letter code (uppercase = white)."""
        char = _CHARS[self.piece_type]
        return char.upper() if self.color == Color.WHITE else char
