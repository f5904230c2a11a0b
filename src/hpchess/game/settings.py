"""Session settings consumed by the presentation layer only."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DisplayMode(str, Enum):
    """Board layout preset. Has no effect on the rules."""

    DESKTOP = "desktop"
    MOBILE = "mobile"

    @classmethod
    def parse(cls, value: str) -> DisplayMode:
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown display mode: {value!r}") from None

    @property
    def target_board_px(self) -> int:
        """Preferred board edge before fitting to the window."""
        return 680 if self is DisplayMode.DESKTOP else 440


@dataclass
class GameSettings:
    """All user-configurable session settings."""

    display_mode: DisplayMode = DisplayMode.DESKTOP
    show_legal_moves: bool = True
    animate_attacks: bool = True
    attack_animation_ms: int = 420
