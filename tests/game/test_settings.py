"""Tests for session settings."""

import pytest

from hpchess.game.settings import DisplayMode, GameSettings


class TestDisplayMode:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("desktop", DisplayMode.DESKTOP),
            ("mobile", DisplayMode.MOBILE),
            (" Mobile ", DisplayMode.MOBILE),
        ],
    )
    def test_parse(self, raw: str, expected: DisplayMode) -> None:
        assert DisplayMode.parse(raw) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="tablet"):
            DisplayMode.parse("tablet")

    def test_target_board_px(self) -> None:
        assert DisplayMode.DESKTOP.target_board_px == 680
        assert DisplayMode.MOBILE.target_board_px == 440

    def test_is_str(self) -> None:
        assert DisplayMode.MOBILE == "mobile"


class TestGameSettings:
    def test_defaults(self) -> None:
        settings = GameSettings()
        assert settings.display_mode is DisplayMode.DESKTOP
        assert settings.show_legal_moves
        assert settings.animate_attacks
        assert settings.attack_animation_ms > 0

    def test_instances_are_independent(self) -> None:
        a = GameSettings()
        b = GameSettings()
        a.display_mode = DisplayMode.MOBILE
        assert b.display_mode is DisplayMode.DESKTOP
