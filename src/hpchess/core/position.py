"""Position — board plus side to move and last-move memory."""

from __future__ import annotations

from dataclasses import dataclass

from hpchess.core.board import Board
from hpchess.core.enums import Color
from hpchess.core.piece import Piece
from hpchess.core.types import Square


@dataclass(frozen=True, slots=True)
class LastMove:
    """The only history kept: enough to validate en passant next turn.

    After a non-lethal attack ``to_sq`` equals ``from_sq``.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    was_double_pawn_step: bool = False


class Position:
    """Full game state: board + side to move + last move."""

    __slots__ = ("board", "side_to_move", "last_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        last_move: LastMove | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.last_move = last_move

    def copy(self) -> Position:
        """Independent copy; changes to it are never visible here."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            last_move=self.last_move,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.last_move == other.last_move
        )

    def __repr__(self) -> str:
        return f"Position({self.side_to_move} to move)\n{self.board!r}"
