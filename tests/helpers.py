"""Position builders for tests (no FEN: placement is spelled out)."""

from __future__ import annotations

from hpchess.core.board import Board
from hpchess.core.enums import Color, PieceType
from hpchess.core.piece import Piece
from hpchess.core.position import LastMove, Position
from hpchess.core.types import Square, parse_square

W = Color.WHITE
B = Color.BLACK

P = PieceType.PAWN
N = PieceType.KNIGHT
BI = PieceType.BISHOP
R = PieceType.ROOK
Q = PieceType.QUEEN
K = PieceType.KING


def sq(name: str) -> Square:
    return parse_square(name)


def make_position(
    pieces: dict[str, Piece],
    side_to_move: Color = Color.WHITE,
    last_move: LastMove | None = None,
) -> Position:
    """Position with *pieces* placed by algebraic square name."""
    board = Board()
    for name, piece in pieces.items():
        board[parse_square(name)] = piece
    return Position(board=board, side_to_move=side_to_move, last_move=last_move)


def targets(moves) -> set[Square]:
    return {m.target for m in moves}
