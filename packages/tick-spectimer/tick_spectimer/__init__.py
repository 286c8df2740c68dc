"""tick-spectimer - Special attack regen and surge cooldown timers for wave-based content."""
from __future__ import annotations

from tick_spectimer.config import TimerConfig
from tick_spectimer.display import (
    DisplayFormat,
    format_cooldown,
    format_regen,
    show_cooldown,
    show_regen,
)
from tick_spectimer.events import (
    ChatMessage,
    EquipmentChanged,
    Event,
    MenuOptionClicked,
    NpcSpawned,
    RaidStateChanged,
    SessionEnded,
    SessionStarted,
    Tick,
)
from tick_spectimer.ingest import apply_event
from tick_spectimer.rules import MessageRules, Transition, default_rules
from tick_spectimer.session import SpecTimerSession, replay
from tick_spectimer.types import (
    CooldownState,
    IgnoreWindow,
    PhaseState,
    Position,
    RegenState,
    SessionState,
)

__all__ = [
    "TimerConfig",
    "SpecTimerSession",
    "replay",
    "apply_event",
    "SessionState",
    "RegenState",
    "PhaseState",
    "CooldownState",
    "IgnoreWindow",
    "Position",
    "Event",
    "SessionStarted",
    "SessionEnded",
    "Tick",
    "ChatMessage",
    "EquipmentChanged",
    "NpcSpawned",
    "MenuOptionClicked",
    "RaidStateChanged",
    "MessageRules",
    "Transition",
    "default_rules",
    "DisplayFormat",
    "format_regen",
    "format_cooldown",
    "show_regen",
    "show_cooldown",
]
