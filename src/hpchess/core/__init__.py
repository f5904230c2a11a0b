"""Core domain layer — pure HP chess rules with zero external dependencies.

Quick start::

    from hpchess.core import Rules, parse_square

    pos = Rules.new_game()
    e2 = parse_square("e2")
    for move in Rules.legal_moves(pos, e2):
        print(move)
"""

from hpchess.core.board import Board
from hpchess.core.combat import (
    CombatPreview,
    Resolution,
    preview_combat,
    resolve_move,
)
from hpchess.core.enums import Color, GameStatus, HealthBand, MoveFlag, PieceType
from hpchess.core.errors import (
    IllegalMoveError,
    InvalidSquareError,
    MoveInProgressError,
    NoPieceAtOriginError,
    RulesError,
)
from hpchess.core.move import Move
from hpchess.core.move_generator import MoveGenerator, generate_moves
from hpchess.core.piece import DAMAGE, MAX_HP, Piece
from hpchess.core.position import LastMove, Position
from hpchess.core.rules import MoveResult, Rules
from hpchess.core.types import Square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "HealthBand",
    "MoveFlag",
    "PieceType",
    # Errors
    "IllegalMoveError",
    "InvalidSquareError",
    "MoveInProgressError",
    "NoPieceAtOriginError",
    "RulesError",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CombatPreview",
    "DAMAGE",
    "LastMove",
    "MAX_HP",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    "Resolution",
    "Rules",
    # Functional entry points
    "generate_moves",
    "preview_combat",
    "resolve_move",
]
