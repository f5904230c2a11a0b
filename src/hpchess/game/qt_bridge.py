"""Qt bridge exposing a :class:`GameController` as signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from hpchess.core.combat import CombatPreview
from hpchess.core.enums import Color, GameStatus
from hpchess.core.errors import RulesError
from hpchess.core.move import Move
from hpchess.core.rules import MoveResult
from hpchess.core.types import Square, in_bounds
from hpchess.game.controller import GameController
from hpchess.game.interfaces import GamePhase, SelectionKind
from hpchess.game.settings import DisplayMode, GameSettings
from hpchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Main-thread adapter between a Qt presentation layer and the rules.

    Combat moves pause in RESOLVING after :attr:`attack_started` so the view
    can animate; the view calls :meth:`finish_attack` when it is done. Plain
    relocations are committed straight away.
    """

    selection_changed = pyqtSignal(object, object)  # square | None, list[Move]
    attack_started = pyqtSignal(object, object, object)  # origin, move, preview
    move_committed = pyqtSignal(object)  # MoveResult
    game_over = pyqtSignal(object, object)  # GameStatus, winner | None
    phase_changed = pyqtSignal(object)  # GamePhase
    display_mode_changed = pyqtSignal(object)  # DisplayMode
    move_rejected = pyqtSignal(str)

    __slots__ = ("_controller", "_settings")

    def __init__(
        self,
        controller: GameController | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else GameSettings()

        events = self._controller.events
        events.on_selection_changed.append(self._on_selection)
        events.on_combat.append(self._on_combat)
        events.on_move.append(self._on_move)
        events.on_game_over.append(self._on_game_over)
        events.on_phase_changed.append(self._on_phase)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> GameSettings:
        return self._settings

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot(int, int)
    def click_square(self, row: int, col: int) -> None:
        """Handle a board click; coordinates off the board clear the selection."""
        sq = Square(row, col) if in_bounds(row, col) else None
        try:
            result = self._controller.select_square(sq)
        except RulesError as exc:
            self.move_rejected.emit(str(exc))
            return

        if result.kind != SelectionKind.MOVE_STARTED:
            return
        preview = result.preview
        animate = self._settings.animate_attacks
        if preview is None or not preview.is_combat or not animate:
            self._finish()

    @pyqtSlot()
    def finish_attack(self) -> None:
        """Commit the pending move once the attack presentation has ended."""
        if not self._controller.state.is_resolving:
            _LOGGER.debug("finish_attack called with no pending move")
            return
        self._finish()

    @pyqtSlot(str)
    def set_display_mode(self, mode: str) -> None:
        """Switch layout preset. Unknown modes are ignored."""
        try:
            display_mode = DisplayMode.parse(mode)
        except ValueError:
            _LOGGER.warning("Ignoring unknown display mode %r", mode)
            return
        if display_mode == self._settings.display_mode:
            return
        self._settings.display_mode = display_mode
        self.display_mode_changed.emit(display_mode)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self) -> None:
        try:
            self._controller.complete_move()
        except RulesError as exc:
            self.move_rejected.emit(str(exc))

    def _on_selection(self, sq: Square | None, moves: list[Move]) -> None:
        self.selection_changed.emit(sq, moves)

    def _on_combat(self, origin: Square, move: Move, preview: CombatPreview) -> None:
        self.attack_started.emit(origin, move, preview)

    def _on_move(self, result: MoveResult, _state: GameState) -> None:
        self.move_committed.emit(result)

    def _on_game_over(self, status: GameStatus, winner: Color | None) -> None:
        self.game_over.emit(status, winner)

    def _on_phase(self, phase: GamePhase) -> None:
        self.phase_changed.emit(phase)
