"""Special attack regen countdown.

Energy regenerates once per cadence (50 ticks, or 25 with the accelerant
equipped). The countdown is resynchronised whenever energy actually rises,
unless the rise is explained by a restore effect announced in chat.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_spectimer.types import IgnoreWindow, RegenState

if TYPE_CHECKING:
    from tick_spectimer.config import TimerConfig

logger = logging.getLogger(__name__)


def on_tick(
    regen: RegenState,
    energy: int,
    tick_index: int,
    paused: bool,
    config: TimerConfig,
) -> None:
    """Advance the countdown by one game tick.

    Tick execution order:
    1. Drop an expired ignore window
    2. Resync to a full cycle if energy rose from natural regen
    3. Record the energy sample
    4. Pin at full cadence when energy is full, hold when paused,
       otherwise count down and wrap at zero
    """
    energy = config.clamp_energy(energy)

    window = regen.ignore_window
    if window is not None and not window.is_open(tick_index):
        regen.ignore_window = window = None

    last = regen.last_energy
    if last is not None and energy > last:
        increase = energy - last
        headroom = config.max_energy - last
        # An increase beyond the expected restore (and below the cap) means
        # natural regen landed on the same tick as the effect.
        natural_too = (
            window is not None
            and increase > window.expected_delta
            and increase <= headroom
        )
        if window is not None and not natural_too:
            logger.debug("energy +%d attributed to restore effect", increase)
        else:
            regen.ticks_until_regen = regen.cadence
            logger.debug("energy +%d from regen, countdown resynced", increase)

    regen.last_energy = energy

    if energy >= config.max_energy:
        regen.ticks_until_regen = regen.cadence
    elif paused:
        pass
    else:
        regen.ticks_until_regen -= 1
        if regen.ticks_until_regen <= 0:
            regen.ticks_until_regen = regen.cadence


def set_accelerated(regen: RegenState, accelerated: bool, config: TimerConfig) -> bool:
    """Switch cadence. Returns False if the flag did not change."""
    if accelerated == regen.accelerated:
        return False

    regen.accelerated = accelerated
    regen.cadence = config.cadence(accelerated)
    if accelerated:
        regen.ticks_until_regen = min(regen.ticks_until_regen, regen.cadence)
    else:
        regen.ticks_until_regen = regen.cadence
    logger.debug("accelerated=%s, countdown now %d", accelerated, regen.ticks_until_regen)
    return True


def open_ignore_window(
    regen: RegenState, tick_index: int, expected_delta: int, config: TimerConfig
) -> None:
    regen.ignore_window = IgnoreWindow(
        expires_at=tick_index + config.ignore_window_ticks,
        expected_delta=expected_delta,
    )


def reseed(regen: RegenState, offset: int = 0) -> None:
    """Restart the countdown at ``cadence - offset``."""
    regen.ticks_until_regen = regen.cadence - offset
    logger.debug("countdown reseeded to %d", regen.ticks_until_regen)
