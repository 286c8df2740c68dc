"""Inbound events from the game client, one dataclass per signal kind."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tick_spectimer.types import Position


@dataclass(frozen=True, slots=True)
class SessionStarted:
    energy: int | None = None


@dataclass(frozen=True, slots=True)
class SessionEnded:
    pass


@dataclass(frozen=True, slots=True)
class Tick:
    """One game tick: current energy, tick counter and template position."""

    energy: int
    tick_index: int
    position: Position | None = None


@dataclass(frozen=True, slots=True)
class ChatMessage:
    text: str | None
    tick_index: int | None = None  # falls back to the last observed tick


@dataclass(frozen=True, slots=True)
class EquipmentChanged:
    accelerant: bool


@dataclass(frozen=True, slots=True)
class NpcSpawned:
    name: str | None
    npc_id: int


@dataclass(frozen=True, slots=True)
class MenuOptionClicked:
    option: str | None


@dataclass(frozen=True, slots=True)
class RaidStateChanged:
    """Raid status value changed. ``position`` falls back to the last known one."""

    state: int
    position: Position | None = None


Event = Union[
    SessionStarted,
    SessionEnded,
    Tick,
    ChatMessage,
    EquipmentChanged,
    NpcSpawned,
    MenuOptionClicked,
    RaidStateChanged,
]
