"""Game session layer — controller, state machine, settings, Qt bridge.

Quick start::

    from hpchess.game import GameController
    from hpchess.core import parse_square

    ctrl = GameController()
    ctrl.new_game()
    ctrl.select_square(parse_square("e2"))
    ctrl.select_square(parse_square("e4"))  # starts the move
    ctrl.complete_move()

The Qt bridge lives in :mod:`hpchess.game.qt_bridge` and is imported
explicitly so the rest of the package does not require PyQt6 at import time.
"""

from hpchess.game.controller import GameController, GameEvents
from hpchess.game.interfaces import (
    GamePhase,
    IGameController,
    SelectionKind,
    SelectionResult,
)
from hpchess.game.settings import DisplayMode, GameSettings
from hpchess.game.state import GameState, PendingMove

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "SelectionKind",
    "SelectionResult",
    # Concrete
    "DisplayMode",
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "PendingMove",
]
