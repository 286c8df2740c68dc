"""Tests for tick_spectimer.config — TimerConfig."""
from __future__ import annotations

import dataclasses

import pytest

from tick_spectimer.config import TimerConfig


class TestDefaults:
    def test_defaults_match_game_constants(self) -> None:
        config = TimerConfig()
        assert config.regen_ticks == 50
        assert config.accelerated_regen_ticks == 25
        assert config.max_energy == 1000
        assert config.ignore_window_ticks == 2
        assert config.delve_reseed_offset == 2
        assert config.surge_restore == 250
        assert config.death_charge_restore == 150
        assert config.raid_active_states == frozenset({2, 3})

    def test_cooldown_seconds_is_five_minutes(self) -> None:
        assert TimerConfig().cooldown_seconds == pytest.approx(300.0)

    def test_cadence_follows_accelerated_flag(self) -> None:
        config = TimerConfig()
        assert config.cadence(False) == 50
        assert config.cadence(True) == 25

    def test_clamp_energy(self) -> None:
        config = TimerConfig()
        assert config.clamp_energy(-5) == 0
        assert config.clamp_energy(640) == 640
        assert config.clamp_energy(1200) == 1000

    def test_frozen(self) -> None:
        config = TimerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.regen_ticks = 10  # type: ignore[misc]


class TestValidation:
    def test_non_positive_cadence_rejected(self) -> None:
        with pytest.raises(ValueError):
            TimerConfig(regen_ticks=0)

    def test_accelerated_cannot_exceed_normal(self) -> None:
        with pytest.raises(ValueError):
            TimerConfig(regen_ticks=20, accelerated_regen_ticks=25)

    def test_reseed_offset_must_leave_a_tick(self) -> None:
        with pytest.raises(ValueError):
            TimerConfig(delve_reseed_offset=25)

    def test_non_positive_tick_seconds_rejected(self) -> None:
        with pytest.raises(ValueError):
            TimerConfig(tick_seconds=0)

    def test_negative_ignore_window_rejected(self) -> None:
        with pytest.raises(ValueError):
            TimerConfig(ignore_window_ticks=-1)
