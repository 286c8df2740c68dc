"""Core state records for the special attack timers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_spectimer.config import TimerConfig


@dataclass(frozen=True, slots=True)
class Position:
    """Template (de-instanced) location of the player."""

    zone_id: int
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class IgnoreWindow:
    """Grace period after a restore message. Inclusive of ``expires_at``."""

    expires_at: int
    expected_delta: int

    def is_open(self, tick_index: int) -> bool:
        return tick_index <= self.expires_at


@dataclass
class RegenState:
    """Runtime state of the regen countdown. Mutable."""

    ticks_until_regen: int
    cadence: int
    accelerated: bool = False
    last_energy: int | None = None  # None until the first sample
    ignore_window: IgnoreWindow | None = None

    @classmethod
    def initial(cls, config: TimerConfig) -> RegenState:
        return cls(ticks_until_regen=config.regen_ticks, cadence=config.regen_ticks)


@dataclass
class PhaseState:
    """Encounter phase flags shared by both timers."""

    encounter_paused: bool = False  # between waves/delves, stops regen
    room_paused: bool = False  # between raid rooms, stops the cooldown only
    inside_raid: bool = False
    zone_id: int | None = None  # last zone seen by the per-tick entry check
    entered_room: bool = False  # combat-area entry already consumed in zone_id
    position: Position | None = None  # last known position

    @property
    def cooldown_paused(self) -> bool:
        return self.encounter_paused or self.room_paused


@dataclass
class CooldownState:
    """Consumable cooldown. At most one of the two fields is set."""

    end_time: float | None = None
    paused_remaining: float | None = None

    @property
    def active(self) -> bool:
        return self.end_time is not None or self.paused_remaining is not None

    @property
    def paused(self) -> bool:
        return self.paused_remaining is not None


@dataclass
class SessionState:
    """Everything the core owns for one logged-in session."""

    regen: RegenState
    phase: PhaseState = field(default_factory=PhaseState)
    cooldown: CooldownState = field(default_factory=CooldownState)
    logged_in: bool = False
    tick_index: int = 0  # last tick index observed from the tick source

    @classmethod
    def initial(cls, config: TimerConfig) -> SessionState:
        return cls(regen=RegenState.initial(config))
