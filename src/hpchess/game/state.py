"""Game state — authoritative position, phase, selection and pending move."""

from __future__ import annotations

from dataclasses import dataclass, field

from hpchess.core.enums import Color, GameStatus
from hpchess.core.move import Move
from hpchess.core.move_generator import MoveGenerator
from hpchess.core.position import LastMove, Position
from hpchess.core.rules import MoveResult, Rules
from hpchess.core.types import Square
from hpchess.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class PendingMove:
    """A move whose presentation step is running and which awaits commit."""

    origin: Square
    move: Move


@dataclass
class GameState:
    """Session data: the live position plus UI-facing selection state.

    This is a pure data/logic class — no threading, no UI. Only
    :meth:`apply_result` replaces :attr:`position`.
    """

    position: Position = field(default_factory=Rules.new_game, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: GameStatus = field(default=GameStatus.ACTIVE, init=False)
    selected: Square | None = field(default=None, init=False)
    selected_moves: list[Move] = field(default_factory=list, init=False)
    pending: PendingMove | None = field(default=None, init=False)
    ply_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game."""
        self.position = position if position is not None else Rules.new_game()
        self.status = Rules.game_status(self.position)
        self.phase = (
            GamePhase.AWAITING_MOVE
            if self.status == GameStatus.ACTIVE
            else GamePhase.GAME_OVER
        )
        self.pending = None
        self.ply_count = 0
        self.clear_selection()

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, sq: Square) -> list[Move]:
        self.selected = sq
        self.selected_moves = Rules.legal_moves(self.position, sq)
        return self.selected_moves

    def clear_selection(self) -> None:
        self.selected = None
        self.selected_moves = []

    def selected_move_to(self, target: Square) -> Move | None:
        """The cached legal move of the selected piece landing on *target*."""
        for move in self.selected_moves:
            if move.target == target:
                return move
        return None

    # ── Commit ───────────────────────────────────────────────────────────

    def apply_result(self, result: MoveResult) -> None:
        """Adopt a committed move's position as the new authoritative state."""
        self.position = result.position
        self.status = result.status
        self.ply_count += 1
        self.pending = None
        self.phase = (
            GamePhase.AWAITING_MOVE
            if result.status == GameStatus.ACTIVE
            else GamePhase.GAME_OVER
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def last_move(self) -> LastMove | None:
        return self.position.last_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_resolving(self) -> bool:
        return self.pending is not None

    @property
    def in_check(self) -> bool:
        return Rules.is_in_check(self.position)

    @property
    def winner(self) -> Color | None:
        if self.status == GameStatus.CHECKMATE:
            return self.side_to_move.opposite
        return None

    def movable_squares(self) -> list[Square]:
        """Squares of the side to move that have at least one legal move."""
        return list(MoveGenerator(self.position).generate_legal_moves())

    def status_text(self) -> str:
        """Headline for the status display."""
        if self.status == GameStatus.CHECKMATE:
            winner = self.side_to_move.opposite
            return f"Checkmate • {winner.name.capitalize()} wins"
        if self.status == GameStatus.STALEMATE:
            return "Stalemate"
        text = f"{self.side_to_move.name.capitalize()} to move"
        if self.in_check:
            text += " • Check"
        return text
