"""Pseudo-legal and legal move generation + attack detection.

Two explicit views of a piece's reach share the same helpers:

* :meth:`MoveGenerator.moves_for` — squares the piece may move to by its
  movement rules (pawn pushes, diagonal captures, en passant, castling).
* :meth:`MoveGenerator.attacks_for` — squares the piece threatens. Pawns
  threaten both forward diagonals whatever stands there and never the square
  ahead; kings never "attack" by castling.

Legality is decided by resolving each pseudo-move with the combat resolver on
a copy of the board, so a non-lethal attack that leaves the attacker at home
is judged on the board it actually produces.
"""

from __future__ import annotations

from dataclasses import dataclass

from hpchess.core.board import Board
from hpchess.core.combat import resolve_move
from hpchess.core.enums import Color, MoveFlag, PieceType
from hpchess.core.move import Move
from hpchess.core.piece import Piece
from hpchess.core.position import Position
from hpchess.core.types import Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


@dataclass(frozen=True, slots=True)
class _CastleSide:
    rook_col: int
    empty_cols: tuple[int, ...]
    safe_cols: tuple[int, ...]
    king_to_col: int
    rook_to_col: int


# The king's own square is covered by the "not in check" precondition.
_CASTLE_SIDES: tuple[_CastleSide, ...] = (
    _CastleSide(7, (5, 6), (5, 6), king_to_col=6, rook_to_col=5),
    _CastleSide(0, (1, 2, 3), (3, 2), king_to_col=2, rook_to_col=3),
)
_KING_START_COL = 4


# -- Attack maps (board-level, no history needed) ----------------------------


def attacked_squares(board: Board, sq: Square) -> list[Square]:
    """Attack map of the piece on *sq* (empty list for an empty square)."""
    piece = board[sq]
    if piece is None:
        return []

    pt = piece.piece_type
    if pt == PieceType.PAWN:
        targets: list[Square] = []
        for d_col in (-1, 1):
            to_sq = sq.offset(piece.color.forward, d_col)
            if to_sq is not None:
                targets.append(to_sq)
        return targets
    if pt == PieceType.KNIGHT:
        return _step_targets(board, sq, piece, KNIGHT_OFFSETS)
    if pt == PieceType.KING:
        return _step_targets(board, sq, piece, KING_OFFSETS)
    return _ray_targets(board, sq, piece, _SLIDER_DIRS[pt])


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* in the attack map of any piece of *by_color*?"""
    for from_sq, _piece in board.pieces(by_color):
        if sq in attacked_squares(board, from_sq):
            return True
    return False


def is_king_attacked(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? A missing king is never in check."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)


def _step_targets(
    board: Board,
    sq: Square,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
) -> list[Square]:
    targets: list[Square] = []
    for d_row, d_col in offsets:
        to_sq = sq.offset(d_row, d_col)
        if to_sq is None:
            continue
        occupant = board[to_sq]
        if occupant is None or occupant.color != piece.color:
            targets.append(to_sq)
    return targets


def _ray_targets(
    board: Board,
    sq: Square,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
) -> list[Square]:
    targets: list[Square] = []
    for d_row, d_col in directions:
        to_sq = sq.offset(d_row, d_col)
        while to_sq is not None:
            occupant = board[to_sq]
            if occupant is None:
                targets.append(to_sq)
                to_sq = to_sq.offset(d_row, d_col)
                continue
            if occupant.color != piece.color:
                targets.append(to_sq)
            break
    return targets


# -- Generator ----------------------------------------------------------------


class MoveGenerator:
    """Generates pseudo-legal and legal moves for a :class:`Position`.

    The generator never mutates the position; simulations run on copies.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def moves_for(self, sq: Square) -> list[Move]:
        """Pseudo-moves of the piece on *sq* (may leave its king in check)."""
        piece = self._board[sq]
        if piece is None:
            return []

        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._gen_pawn(sq, piece)
        if pt == PieceType.KING:
            moves = [Move(t) for t in attacked_squares(self._board, sq)]
            moves.extend(self._gen_castling(sq, piece))
            return moves
        return [Move(t) for t in attacked_squares(self._board, sq)]

    def attacks_for(self, sq: Square) -> list[Square]:
        """Squares the piece on *sq* threatens."""
        return attacked_squares(self._board, sq)

    def legal_moves(self, sq: Square) -> list[Move]:
        """Pseudo-moves of *sq* that do not leave the mover's king attacked."""
        piece = self._board[sq]
        if piece is None:
            return []

        legal: list[Move] = []
        for move in self.moves_for(sq):
            resolution = resolve_move(self._board, sq, move)
            if not is_king_attacked(resolution.board, piece.color):
                legal.append(move)
        return legal

    def generate_legal_moves(
        self, color: Color | None = None
    ) -> dict[Square, list[Move]]:
        """Legal moves of every piece of *color* (default: side to move).

        Pieces without a legal move are omitted.
        """
        color = self._pos.side_to_move if color is None else color
        result: dict[Square, list[Move]] = {}
        for sq, _piece in self._board.pieces(color):
            moves = self.legal_moves(sq)
            if moves:
                result[sq] = moves
        return result

    def has_legal_move(self, color: Color | None = None) -> bool:
        """Whether *color* has any legal move; stops at the first one found."""
        color = self._pos.side_to_move if color is None else color
        for sq, _piece in self._board.pieces(color):
            if self.legal_moves(sq):
                return True
        return False

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_king_attacked(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._board, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece) -> list[Move]:
        board = self._board
        forward = piece.color.forward
        start_row = piece.color.back_rank + forward
        moves: list[Move] = []

        one_step = sq.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(Move(one_step))
            two_step = sq.offset(2 * forward, 0)
            if (
                sq.row == start_row
                and two_step is not None
                and board.is_empty(two_step)
            ):
                moves.append(Move(two_step))

        for cap_sq in attacked_squares(board, sq):
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                moves.append(Move(cap_sq))

        ep = self._en_passant_target(sq, piece)
        if ep is not None:
            moves.append(Move(ep, MoveFlag.EN_PASSANT))
        return moves

    def _en_passant_target(self, sq: Square, piece: Piece) -> Square | None:
        last = self._pos.last_move
        if last is None or not last.was_double_pawn_step:
            return None
        enemy = last.piece
        if enemy.piece_type != PieceType.PAWN or enemy.color == piece.color:
            return None
        if last.to_sq.row != sq.row or abs(last.to_sq.col - sq.col) != 1:
            return None
        landing = sq.offset(piece.color.forward, last.to_sq.col - sq.col)
        if landing is None or not self._board.is_empty(landing):
            return None
        return landing

    def _gen_castling(self, king_sq: Square, king: Piece) -> list[Move]:
        if king.has_moved or self.is_in_check(king.color):
            return []
        if king_sq != Square(king.color.back_rank, _KING_START_COL):
            return []

        board = self._board
        row = king_sq.row
        opponent = king.color.opposite
        moves: list[Move] = []

        for side in _CASTLE_SIDES:
            rook_sq = Square(row, side.rook_col)
            rook = board[rook_sq]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue
            if any(not board.is_empty(Square(row, col)) for col in side.empty_cols):
                continue
            if any(
                self.is_square_attacked(Square(row, col), opponent)
                for col in side.safe_cols
            ):
                continue
            moves.append(
                Move(
                    Square(row, side.king_to_col),
                    MoveFlag.CASTLE,
                    rook_from=rook_sq,
                    rook_to=Square(row, side.rook_to_col),
                )
            )
        return moves


def generate_moves(
    position: Position, sq: Square, attack_map: bool = False
) -> list[Move]:
    """Functional entry point: pseudo-moves, or the attack map as moves."""
    gen = MoveGenerator(position)
    if attack_map:
        return [Move(t) for t in gen.attacks_for(sq)]
    return gen.moves_for(sq)
