"""Board - piece placement on a fixed 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from hpchess.core.enums import Color, PieceType
from hpchess.core.piece import Piece
from hpchess.core.types import BOARD_SIZE, Square

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces.

    Pieces are immutable values, so :meth:`copy` only duplicates the rows.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._rows[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._rows[sq.row][sq.col] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` pairs, row by row; all colours if *color* is None."""
        for row_idx, row in enumerate(self._rows):
            for col_idx, piece in enumerate(row):
                if piece is None:
                    continue
                if color is not None and piece.color != color:
                    continue
                yield Square(row_idx, col_idx), piece

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    def clear(self) -> None:
        self._rows = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position at full HP."""
        b = cls()
        for col, pt in enumerate(BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._rows):
            cells = [f"{p}{p.hp}" if p else ". " for p in row]
            rows.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        rows.append("  a  b  c  d  e  f  g  h")
        return "\n".join(rows)
