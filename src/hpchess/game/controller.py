"""GameController — the central orchestrator of an HP chess session.

Coordinates selection, the two-phase move commit and status updates.
Emits events via simple callbacks so the UI / tests can subscribe.

A move is committed in two steps so that presentation can run in between::

    preview = ctrl.begin_move(origin, move)   # phase -> RESOLVING
    ...animate the attack using *preview*...
    result = ctrl.complete_move()             # board replaced, turn flips

While a move is pending every further move attempt is rejected with
:class:`MoveInProgressError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hpchess.core.combat import CombatPreview
from hpchess.core.enums import Color, GameStatus
from hpchess.core.errors import (
    IllegalMoveError,
    MoveInProgressError,
    NoPieceAtOriginError,
)
from hpchess.core.move import Move
from hpchess.core.position import Position
from hpchess.core.rules import MoveResult, Rules
from hpchess.core.types import Square
from hpchess.game.interfaces import (
    GamePhase,
    IGameController,
    SelectionKind,
    SelectionResult,
)
from hpchess.game.state import GameState, PendingMove

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square | None, list[Move]], None]
CombatCallback = Callable[[Square, Move, CombatPreview], None]  # origin, move, preview
MoveCallback = Callable[[MoveResult, "GameState"], None]
GameOverCallback = Callable[[GameStatus, Color | None], None]  # status, winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_combat: list[CombatCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns the authoritative position and serialises move commits.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def position(self) -> Position:
        return self._state.position

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, position: Position | None = None) -> None:
        """Start over; *position* overrides the standard setup (tests, puzzles)."""
        self._state = GameState()
        self._state.setup(position)
        self._emit_selection()
        self._emit_phase(self._state.phase)
        if self._state.is_game_over:
            self._emit_game_over()

    def select_square(self, sq: Square | None) -> SelectionResult:
        """Mirror of a board click.

        Clicking a legal target of the selected piece starts that move;
        clicking an own piece selects it; anything else clears the selection.
        """
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE:
            return SelectionResult(SelectionKind.IGNORED, sq)

        if sq is None:
            state.clear_selection()
            self._emit_selection()
            return SelectionResult(SelectionKind.CLEARED)

        if state.selected is not None:
            move = state.selected_move_to(sq)
            if move is not None:
                origin = state.selected
                preview = self.begin_move(origin, move)
                return SelectionResult(
                    SelectionKind.MOVE_STARTED, origin, (move,), preview
                )

        piece = state.position.board[sq]
        if piece is not None and piece.color == state.side_to_move:
            moves = state.select(sq)
            self._emit_selection()
            return SelectionResult(SelectionKind.SELECTED, sq, tuple(moves))

        state.clear_selection()
        self._emit_selection()
        return SelectionResult(SelectionKind.CLEARED, sq)

    def begin_move(self, origin: Square, move: Move) -> CombatPreview:
        """Reserve the commit slot and return the combat preview.

        Validation happens here so a rejected move never enters RESOLVING.
        """
        state = self._state
        if state.is_resolving:
            _LOGGER.warning("Rejected %s->%s: a move is still resolving", origin, move)
            raise MoveInProgressError("A move is already being resolved")
        if state.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.warning(
                "Rejected %s->%s: no moves accepted in phase %s",
                origin,
                move,
                state.phase.name,
            )
            raise IllegalMoveError(f"No moves accepted in phase {state.phase.name}")

        piece = state.position.board[origin]
        if piece is None:
            _LOGGER.warning("Rejected %s->%s: no piece on origin", origin, move)
            raise NoPieceAtOriginError(f"No piece on {origin}")
        if piece.color != state.side_to_move:
            _LOGGER.warning(
                "Rejected %s->%s: it is %s's turn", origin, move, state.side_to_move
            )
            raise IllegalMoveError(f"It is {state.side_to_move}'s turn")
        preview = Rules.preview_combat(state.position, origin, move)
        if move not in Rules.legal_moves(state.position, origin):
            _LOGGER.warning("Rejected illegal move %s->%s", origin, move)
            raise IllegalMoveError(f"{origin}->{move} is not a legal move")

        state.pending = PendingMove(origin, move)
        state.phase = GamePhase.RESOLVING
        state.clear_selection()
        self._emit_selection()
        self._emit_phase(GamePhase.RESOLVING)
        if preview.is_combat:
            self._emit_combat(origin, move, preview)
        return preview

    def complete_move(self) -> MoveResult:
        """Commit the pending move. The slot is released even on failure."""
        state = self._state
        pending = state.pending
        if pending is None:
            raise IllegalMoveError("No move is pending")

        try:
            result = Rules.commit_move(state.position, pending.origin, pending.move)
        except Exception:
            state.pending = None
            state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
            raise

        state.apply_result(result)
        self._emit_move(result)
        self._emit_phase(state.phase)
        if state.is_game_over:
            self._emit_game_over()
        return result

    def submit_move(self, origin: Square, move: Move) -> MoveResult:
        self.begin_move(origin, move)
        return self.complete_move()

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, sq: Square) -> list[Move]:
        return Rules.legal_moves(self._state.position, sq)

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._state.position, color)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._state.selected, list(self._state.selected_moves))

    def _emit_combat(self, origin: Square, move: Move, preview: CombatPreview) -> None:
        for cb in self.events.on_combat:
            cb(origin, move, preview)

    def _emit_move(self, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(result, self._state)

    def _emit_game_over(self) -> None:
        status = self._state.status
        winner = self._state.winner
        _LOGGER.info("Game over: %s (winner: %s)", status.name.lower(), winner)
        for cb in self.events.on_game_over:
            cb(status, winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
