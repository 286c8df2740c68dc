"""Text and visibility helpers for overlays showing the timers."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from tick_spectimer.session import to_millis

if TYPE_CHECKING:
    from tick_spectimer.session import SpecTimerSession


class DisplayFormat(Enum):
    TICKS = "Ticks"
    SECONDS = "Seconds"
    DECIMALS = "Decimals"

    def __str__(self) -> str:
        return self.value


def format_regen(
    ticks: int, cadence: int, fmt: DisplayFormat, tick_seconds: float = 0.6
) -> str:
    """Regen countdown text. A timer sitting at its full cadence shows 0."""
    shown = 0 if ticks == cadence else ticks
    millis = shown * to_millis(tick_seconds)
    if fmt is DisplayFormat.SECONDS:
        # Round up so the shown second is the one regen happens in.
        return str(-(-millis // 1000))
    if fmt is DisplayFormat.DECIMALS:
        return f"{millis / 1000:.1f}s"
    return str(shown)


def format_cooldown(
    remaining: float, fmt: DisplayFormat, tick_seconds: float = 0.6
) -> str:
    """Cooldown text: ticks, ``m:ss``, or ``m:ss.s``."""
    millis = to_millis(remaining)
    if fmt is DisplayFormat.SECONDS:
        total = millis // 1000
        return f"{total // 60}:{total % 60:02d}"
    if fmt is DisplayFormat.DECIMALS:
        minutes, rest = divmod(millis, 60_000)
        return f"{minutes}:{rest / 1000:04.1f}"
    return str(millis // to_millis(tick_seconds))


def show_regen(session: SpecTimerSession) -> bool:
    # Nothing to count while full, and the timer restarts on the next wave.
    return not session.is_energy_full() and not session.is_encounter_paused()


def show_cooldown(session: SpecTimerSession) -> bool:
    return session.cooldown_remaining() > 0
