"""Timer configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TimerConfig:
    """Immutable timing constants for the regen and cooldown timers.

    Attributes:
        regen_ticks: Ticks in one normal regeneration cycle.
        accelerated_regen_ticks: Ticks in one cycle while the accelerant
            equipment is worn.
        max_energy: Full special attack energy in internal units.
        tick_seconds: Wall-clock length of one game tick.
        ignore_window_ticks: Ticks after a restore message during which a
            matching energy increase is not treated as regeneration.
        delve_reseed_offset: How many ticks short of a full cycle the timer
            is reseeded when a delve boss spawns.
        cooldown_ticks: Consumable cooldown length in ticks.
        surge_restore: Energy restored by one surge potion dose.
        death_charge_restore: Energy restored by a death charge proc.
        raid_active_states: Raid status values that mean "inside the raid".
        delve_boss_marker: Substring identifying the delve boss by name.
    """

    regen_ticks: int = 50
    accelerated_regen_ticks: int = 25
    max_energy: int = 1000
    tick_seconds: float = 0.6
    ignore_window_ticks: int = 2
    delve_reseed_offset: int = 2
    cooldown_ticks: int = 500
    surge_restore: int = 250
    death_charge_restore: int = 150
    raid_active_states: frozenset[int] = field(default_factory=lambda: frozenset({2, 3}))
    delve_boss_marker: str = "Doom"

    def __post_init__(self) -> None:
        if self.regen_ticks <= 0 or self.accelerated_regen_ticks <= 0:
            raise ValueError("regen cadences must be positive")
        if self.accelerated_regen_ticks > self.regen_ticks:
            raise ValueError("accelerated cadence cannot exceed the normal cadence")
        if self.max_energy <= 0:
            raise ValueError("max_energy must be positive")
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")
        if self.cooldown_ticks <= 0:
            raise ValueError("cooldown_ticks must be positive")
        if self.ignore_window_ticks < 0:
            raise ValueError("ignore_window_ticks cannot be negative")
        if not 0 <= self.delve_reseed_offset < self.accelerated_regen_ticks:
            raise ValueError("delve_reseed_offset must leave at least one tick")

    @property
    def cooldown_seconds(self) -> float:
        return self.cooldown_ticks * self.tick_seconds

    def cadence(self, accelerated: bool) -> int:
        return self.accelerated_regen_ticks if accelerated else self.regen_ticks

    def clamp_energy(self, energy: int) -> int:
        return max(0, min(energy, self.max_energy))
