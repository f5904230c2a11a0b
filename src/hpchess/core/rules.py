"""High-level rules facade: new game, legal moves, commit, status."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hpchess.core.combat import CombatPreview, preview_combat, resolve_move
from hpchess.core.enums import Color, GameStatus
from hpchess.core.errors import IllegalMoveError, NoPieceAtOriginError
from hpchess.core.move import Move
from hpchess.core.move_generator import MoveGenerator
from hpchess.core.position import LastMove, Position
from hpchess.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a committed move. ``position`` replaces the previous one."""

    position: Position
    status: GameStatus
    last_move: LastMove
    combat: CombatPreview


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def new_game() -> Position:
        """Standard initial position, white to move."""
        return Position()

    @staticmethod
    def legal_moves(position: Position, sq: Square) -> list[Move]:
        return MoveGenerator(position).legal_moves(sq)

    @staticmethod
    def preview_combat(
        position: Position, origin: Square, move: Move
    ) -> CombatPreview:
        """Read-only combat outcome used to drive presentation before commit."""
        return preview_combat(position.board, origin, move)

    @staticmethod
    def commit_move(position: Position, origin: Square, move: Move) -> MoveResult:
        """Validate and apply *move*, returning the next position.

        *position* itself is never modified. All checks run before anything
        is resolved, so a raised error leaves no partial state behind.
        """
        piece = position.board[origin]
        if piece is None:
            raise NoPieceAtOriginError(f"No piece on {origin}")
        if piece.color != position.side_to_move:
            raise IllegalMoveError(
                f"It is {position.side_to_move}'s turn; "
                f"{origin} holds a {piece.color} piece"
            )
        if move not in Rules.legal_moves(position, origin):
            raise IllegalMoveError(f"{origin}->{move} is not a legal move")

        resolution = resolve_move(position.board, origin, move)
        last_move = LastMove(
            from_sq=origin,
            to_sq=resolution.destination,
            piece=resolution.moved_piece,
            was_double_pawn_step=resolution.was_double_pawn_step,
        )
        next_position = Position(
            board=resolution.board,
            side_to_move=position.side_to_move.opposite,
            last_move=last_move,
        )
        status = Rules.game_status(next_position)

        combat = resolution.combat
        if combat.is_combat:
            _LOGGER.debug(
                "%s %s attacks %s for %d (%s)",
                piece.color,
                origin,
                combat.defender_square,
                combat.damage,
                "lethal" if combat.lethal else f"{combat.defender_hp_after} hp left",
            )
        else:
            _LOGGER.debug("%s %s -> %s", piece.color, origin, move)

        return MoveResult(
            position=next_position,
            status=status,
            last_move=last_move,
            combat=combat,
        )

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        color = position.side_to_move if color is None else color
        return MoveGenerator(position).is_in_check(color)

    @staticmethod
    def game_status(position: Position) -> GameStatus:
        """Status of the side to move, recomputed from scratch."""
        gen = MoveGenerator(position)
        if gen.has_legal_move():
            return GameStatus.ACTIVE
        if gen.is_in_check(position.side_to_move):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.game_status(position) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.game_status(position) == GameStatus.STALEMATE

    @staticmethod
    def winner(position: Position) -> Color | None:
        """The side that delivered mate, or ``None`` if nobody has won."""
        if Rules.is_checkmate(position):
            return position.side_to_move.opposite
        return None
