"""Tests for tick_spectimer.display — overlay text and visibility."""
from __future__ import annotations

import pytest

from tick_spectimer.display import (
    DisplayFormat,
    format_cooldown,
    format_regen,
    show_cooldown,
    show_regen,
)
from tick_spectimer.events import ChatMessage, SessionStarted
from tick_spectimer.session import SpecTimerSession


class TestFormatRegen:
    def test_full_cadence_shows_zero(self) -> None:
        assert format_regen(50, 50, DisplayFormat.TICKS) == "0"
        assert format_regen(25, 25, DisplayFormat.SECONDS) == "0"
        assert format_regen(50, 50, DisplayFormat.DECIMALS) == "0.0s"

    @pytest.mark.parametrize(
        "ticks, fmt, expected",
        [
            (49, DisplayFormat.TICKS, "49"),
            (49, DisplayFormat.SECONDS, "30"),
            (49, DisplayFormat.DECIMALS, "29.4s"),
            (3, DisplayFormat.SECONDS, "2"),
            (5, DisplayFormat.SECONDS, "3"),
            (1, DisplayFormat.DECIMALS, "0.6s"),
        ],
    )
    def test_formats(self, ticks: int, fmt: DisplayFormat, expected: str) -> None:
        assert format_regen(ticks, 50, fmt) == expected


class TestFormatCooldown:
    @pytest.mark.parametrize(
        "remaining, fmt, expected",
        [
            (300.0, DisplayFormat.TICKS, "500"),
            (300.0, DisplayFormat.SECONDS, "5:00"),
            (269.4, DisplayFormat.SECONDS, "4:29"),
            (269.4, DisplayFormat.DECIMALS, "4:29.4"),
            (5.0, DisplayFormat.DECIMALS, "0:05.0"),
            (0.0, DisplayFormat.SECONDS, "0:00"),
        ],
    )
    def test_formats(self, remaining: float, fmt: DisplayFormat, expected: str) -> None:
        assert format_cooldown(remaining, fmt) == expected


class TestDisplayFormat:
    def test_str_is_label(self) -> None:
        assert str(DisplayFormat.DECIMALS) == "Decimals"


class TestVisibility:
    def test_regen_hidden_when_full_or_paused(self) -> None:
        session = SpecTimerSession(clock=lambda: 0.0)
        session.dispatch(SessionStarted(energy=1000))
        assert not show_regen(session)

        session.dispatch(SessionStarted(energy=400))
        assert show_regen(session)

        session.dispatch(ChatMessage("Wave 1 completed!"))
        assert not show_regen(session)

    def test_cooldown_shown_only_while_remaining(self) -> None:
        session = SpecTimerSession(clock=lambda: 0.0)
        session.dispatch(SessionStarted(energy=400))
        assert not show_cooldown(session)
        session.dispatch(ChatMessage("You drink some of your surge potion."))
        assert show_cooldown(session)

    def test_predicates_exported_with_formatters(self) -> None:
        import tick_spectimer

        assert tick_spectimer.show_regen is show_regen
        assert tick_spectimer.show_cooldown is show_cooldown
        assert {"show_regen", "show_cooldown"} <= set(tick_spectimer.__all__)
