"""Abstract interfaces for the game layer.

Presentation code depends on these, not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hpchess.core.combat import CombatPreview
    from hpchess.core.move import Move
    from hpchess.core.rules import MoveResult
    from hpchess.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    RESOLVING = auto()  # a move is being presented / committed
    GAME_OVER = auto()


class SelectionKind(IntEnum):
    """What a square click did."""

    IGNORED = auto()
    CLEARED = auto()
    SELECTED = auto()
    MOVE_STARTED = auto()


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Outcome of :meth:`IGameController.select_square`."""

    kind: SelectionKind
    square: Square | None = None
    moves: tuple[Move, ...] = ()
    preview: CombatPreview | None = None


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self) -> None:
        """Reset to the standard starting position."""

    @abstractmethod
    def select_square(self, sq: Square | None) -> SelectionResult:
        """Handle a click on *sq* (``None`` = outside the board)."""

    @abstractmethod
    def begin_move(self, origin: Square, move: Move) -> CombatPreview:
        """Start resolving a move. Only one may be in flight."""

    @abstractmethod
    def complete_move(self) -> MoveResult:
        """Commit the move started by :meth:`begin_move`."""

    @abstractmethod
    def submit_move(self, origin: Square, move: Move) -> MoveResult:
        """Begin and immediately complete a move."""
