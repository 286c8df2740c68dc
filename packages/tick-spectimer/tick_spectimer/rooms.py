"""Theatre of Blood boss rooms in template coordinates.

Each room says how combat-area entry is detected:

- ``REGION``: first tick inside the room's zone.
- ``BARRIER``: the zone includes a hallway, so entry is the first tick
  standing on the barrier tiles.
- ``NPC``: the fight begins when a specific NPC spawns (or the player
  continues the boss dialogue).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tick_spectimer.types import Position


class Entry(Enum):
    REGION = "region"
    BARRIER = "barrier"
    NPC = "npc"


@dataclass(frozen=True)
class Barrier:
    """Axis-aligned tile range. ``None`` bounds are open."""

    min_x: int | None = None
    max_x: int | None = None
    min_y: int | None = None
    max_y: int | None = None

    def contains(self, x: int, y: int) -> bool:
        if self.min_x is not None and x < self.min_x:
            return False
        if self.max_x is not None and x > self.max_x:
            return False
        if self.min_y is not None and y < self.min_y:
            return False
        if self.max_y is not None and y > self.max_y:
            return False
        return True


@dataclass(frozen=True)
class BossRoom:
    name: str
    zone_id: int
    entry: Entry
    barrier: Barrier | None = None
    npc_id: int | None = None


MAIDEN = BossRoom("Maiden", 12613, Entry.REGION)
BLOAT = BossRoom("Bloat", 13125, Entry.BARRIER, Barrier(max_x=3303, min_y=4446, max_y=4449))
NYLOCAS = BossRoom("Nylocas", 13122, Entry.BARRIER, Barrier(3295, 3296, 4254, 4254))
SOTETSEG = BossRoom("Sotetseg", 13123, Entry.BARRIER, Barrier(3278, 3281, 4308, 4308))
SOTETSEG_MAZE = BossRoom("Sotetseg maze", 13379, Entry.REGION)
XARPUS = BossRoom("Xarpus", 12612, Entry.BARRIER, Barrier(3169, 3171, 4380, 4380))
VERZIK = BossRoom("Verzik", 12611, Entry.NPC, npc_id=8370)

BOSS_ROOMS: dict[int, BossRoom] = {
    room.zone_id: room
    for room in (MAIDEN, BLOAT, NYLOCAS, SOTETSEG, SOTETSEG_MAZE, XARPUS, VERZIK)
}


def room_at(zone_id: int | None) -> BossRoom | None:
    if zone_id is None:
        return None
    return BOSS_ROOMS.get(zone_id)


def crossed_barrier(room: BossRoom, position: Position) -> bool:
    """True if ``position`` stands on the room's entry barrier."""
    if room.entry is not Entry.BARRIER or room.barrier is None:
        return False
    if position.zone_id != room.zone_id:
        return False
    return room.barrier.contains(position.x, position.y)
