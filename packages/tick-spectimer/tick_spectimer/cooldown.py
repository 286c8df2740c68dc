"""Wall-clock consumable cooldown that freezes while the encounter is paused."""
from __future__ import annotations

import logging

from tick_spectimer.types import CooldownState

logger = logging.getLogger(__name__)


def start(state: CooldownState, duration: float, paused: bool, now: float) -> None:
    """Begin a cooldown, replacing any cooldown already running."""
    if paused:
        state.paused_remaining = duration
        state.end_time = None
    else:
        state.end_time = now + duration
        state.paused_remaining = None
    logger.debug("cooldown started: %.1fs (paused=%s)", duration, paused)


def clear(state: CooldownState) -> None:
    state.end_time = None
    state.paused_remaining = None


def remaining(state: CooldownState, now: float) -> float:
    """Seconds left. Zero when inactive, never negative."""
    if state.paused_remaining is not None:
        return state.paused_remaining
    if state.end_time is not None:
        return max(0.0, state.end_time - now)
    return 0.0


def sync_pause(state: CooldownState, should_pause: bool, now: float) -> None:
    """Move between running and paused to match ``should_pause``.

    Pausing snapshots the remaining time; resuming rebuilds the end time
    from that snapshot, so time spent paused is not drained.
    """
    if should_pause and state.paused_remaining is None and state.end_time is not None:
        state.paused_remaining = max(0.0, state.end_time - now)
        state.end_time = None
        logger.debug("cooldown paused with %.1fs left", state.paused_remaining)
    elif not should_pause and state.paused_remaining is not None:
        state.end_time = now + state.paused_remaining
        state.paused_remaining = None
        logger.debug("cooldown resumed")
