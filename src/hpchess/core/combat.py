"""Combat resolution: captures are damage exchanges, not instant removal.

A move onto an enemy piece deals the attacker's damage to it. Only a lethal
hit removes the defender and lets the attacker complete the move; otherwise
the defender keeps its square with reduced HP and the attacker stays home.
"""

from __future__ import annotations

from dataclasses import dataclass

from hpchess.core.board import Board
from hpchess.core.enums import PieceType
from hpchess.core.errors import NoPieceAtOriginError
from hpchess.core.move import Move
from hpchess.core.piece import Piece
from hpchess.core.types import Square


@dataclass(frozen=True, slots=True)
class CombatPreview:
    """Read-only outcome of a move, computed before it is committed."""

    is_combat: bool
    damage: int = 0
    lethal: bool = False
    defender_square: Square | None = None
    defender_hp_after: int = 0


NO_COMBAT = CombatPreview(is_combat=False)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving a move on a copy of the board.

    ``destination`` is where the mover ended up: the move target, or the
    origin after a non-lethal attack.
    """

    board: Board
    moved_piece: Piece
    destination: Square
    was_double_pawn_step: bool
    combat: CombatPreview


def defender_square(board: Board, origin: Square, move: Move) -> Square | None:
    """Square holding the enemy piece this move would hit, if any.

    For en passant that is the square behind the target; otherwise the
    target itself.
    """
    attacker = board[origin]
    if attacker is None:
        return None

    sq: Square | None = move.target
    if move.is_en_passant:
        sq = move.target.offset(-attacker.color.forward, 0)
        if sq is None:
            return None

    defender = board[sq]
    if defender is not None and defender.color != attacker.color:
        return sq
    return None


def preview_combat(board: Board, origin: Square, move: Move) -> CombatPreview:
    """Decide whether *move* is an attack and whether it would be lethal."""
    attacker = board[origin]
    if attacker is None:
        raise NoPieceAtOriginError(f"No piece on {origin}")

    target_sq = defender_square(board, origin, move)
    if target_sq is None:
        return NO_COMBAT

    defender = board[target_sq]
    assert defender is not None
    damage = attacker.damage
    hp_after = defender.hp_after(damage)
    return CombatPreview(
        is_combat=True,
        damage=damage,
        lethal=hp_after <= 0,
        defender_square=target_sq,
        defender_hp_after=hp_after,
    )


def resolve_move(board: Board, origin: Square, move: Move) -> Resolution:
    """Apply *move* to a copy of *board*. The input board is left untouched."""
    attacker = board[origin]
    if attacker is None:
        raise NoPieceAtOriginError(f"No piece on {origin}")

    combat = preview_combat(board, origin, move)
    next_board = board.copy()

    if combat.is_combat and not combat.lethal:
        assert combat.defender_square is not None
        defender = next_board[combat.defender_square]
        assert defender is not None
        next_board[combat.defender_square] = defender.with_damage(combat.damage)
        return Resolution(
            board=next_board,
            moved_piece=attacker,
            destination=origin,
            was_double_pawn_step=False,
            combat=combat,
        )

    if combat.is_combat:
        assert combat.defender_square is not None
        next_board[combat.defender_square] = None

    moved = _relocate(next_board, origin, move)
    return Resolution(
        board=next_board,
        moved_piece=moved,
        destination=move.target,
        was_double_pawn_step=_is_double_pawn_step(attacker, origin, move),
        combat=combat,
    )


# -- Internal helpers ---------------------------------------------------------


def _is_double_pawn_step(piece: Piece, origin: Square, move: Move) -> bool:
    return (
        piece.piece_type == PieceType.PAWN and abs(move.target.row - origin.row) == 2
    )


def _relocate(board: Board, origin: Square, move: Move) -> Piece:
    """Move the piece in place on *board*, handling promotion and castling."""
    piece = board[origin]
    assert piece is not None
    board[origin] = None

    if move.is_en_passant:
        captured_sq = move.target.offset(-piece.color.forward, 0)
        if captured_sq is not None:
            board[captured_sq] = None

    moved = piece.moved()
    if (
        moved.piece_type == PieceType.PAWN
        and move.target.row == moved.color.promotion_row
    ):
        moved = moved.promoted(PieceType.QUEEN)
    board[move.target] = moved

    if move.is_castle and move.rook_from is not None and move.rook_to is not None:
        rook = board[move.rook_from]
        board[move.rook_from] = None
        if rook is not None:
            board[move.rook_to] = rook.moved()

    return moved
