"""SpecTimerSession - owns the state, config and wall clock for one login."""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from tick_spectimer import cooldown
from tick_spectimer.config import TimerConfig
from tick_spectimer.events import Event
from tick_spectimer.ingest import apply_event
from tick_spectimer.rules import MessageRules, default_rules
from tick_spectimer.types import SessionState

logger = logging.getLogger(__name__)


def to_millis(seconds: float) -> int:
    return int(round(seconds * 1000))


class SpecTimerSession:
    def __init__(
        self,
        config: TimerConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
        rules: MessageRules | None = None,
    ) -> None:
        self._config = config if config is not None else TimerConfig()
        self._clock = clock
        self._rules = rules if rules is not None else default_rules()
        self._state = SessionState.initial(self._config)
        logger.debug("chat rules in order: %s", ", ".join(self._rules.names()))

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def rules(self) -> MessageRules:
        return self._rules

    def dispatch(self, event: Event) -> None:
        apply_event(self._state, event, self._config, self._clock(), self._rules)

    def run(self, events: Iterable[Event]) -> None:
        for event in events:
            self.dispatch(event)

    # --- Regen queries ---

    def ticks_until_regen(self) -> int:
        return self._state.regen.ticks_until_regen

    def max_regen_ticks(self) -> int:
        return self._state.regen.cadence

    def seconds_until_regen(self) -> float:
        return self._state.regen.ticks_until_regen * self._config.tick_seconds

    def regen_progress(self) -> float:
        """0.0 just after a regen, approaching 1.0 as the next one nears."""
        regen = self._state.regen
        return 1.0 - regen.ticks_until_regen / regen.cadence

    def is_accelerated(self) -> bool:
        return self._state.regen.accelerated

    def is_encounter_paused(self) -> bool:
        return self._state.phase.encounter_paused

    def is_room_paused(self) -> bool:
        return self._state.phase.room_paused

    # --- Energy queries ---

    def energy(self) -> int | None:
        """Last sampled energy, or None before the first sample."""
        return self._state.regen.last_energy

    def spec_percent(self) -> int:
        energy = self._state.regen.last_energy or 0
        return energy * 100 // self._config.max_energy

    def is_energy_full(self) -> bool:
        energy = self._state.regen.last_energy
        return energy is not None and energy >= self._config.max_energy

    # --- Cooldown queries ---

    def cooldown_remaining(self) -> float:
        return cooldown.remaining(self._state.cooldown, self._clock())

    def cooldown_ticks_remaining(self) -> int:
        return to_millis(self.cooldown_remaining()) // to_millis(self._config.tick_seconds)

    def is_cooldown_paused(self) -> bool:
        return self._state.cooldown.paused


def replay(
    events: Iterable[Event],
    config: TimerConfig | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> SpecTimerSession:
    """Build a fresh session and apply ``events`` in order."""
    session = SpecTimerSession(config, clock)
    session.run(events)
    return session
