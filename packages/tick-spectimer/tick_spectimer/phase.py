"""Encounter phase tracking for the three supported encounter types.

Colosseum (waves)
    "Wave N completed!" pauses regen, "Wave: N" resumes it with a full
    cycle, and claiming the reward chest resumes it without a reseed.
Doom of Mokhaoitl (delves)
    "Delve level: N duration: ..." pauses regen; the boss spawning resumes
    it two ticks short of a full cycle, since the game starts its own timer
    before the spawn is visible.
Theatre of Blood (rooms)
    Never touches the regen countdown. Room completion pauses the
    cooldown until the player enters the next room's combat area, detected
    per room by zone entry, barrier crossing, NPC spawn or dialogue.

Every flag change is followed by a cooldown pause sync.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_spectimer import cooldown, regen
from tick_spectimer.rooms import VERZIK, Entry, crossed_barrier, room_at
from tick_spectimer.rules import Transition

if TYPE_CHECKING:
    from tick_spectimer.config import TimerConfig
    from tick_spectimer.types import Position, SessionState

logger = logging.getLogger(__name__)

BEGIN_OPTION = "Yes, let's begin"
CONTINUE_OPTION = "Continue"

PHASE_TRANSITIONS = frozenset({
    Transition.WAVE_COMPLETED,
    Transition.WAVE_STARTED,
    Transition.REWARD_CLAIMED,
    Transition.DELVE_COMPLETED,
    Transition.ROOM_COMPLETED,
    Transition.RAID_COMPLETED,
})


def sync_cooldown(state: SessionState, now: float) -> None:
    cooldown.sync_pause(state.cooldown, state.phase.cooldown_paused, now)


def set_encounter_paused(state: SessionState, paused: bool, now: float) -> None:
    if state.phase.encounter_paused != paused:
        logger.debug("encounter %s", "paused" if paused else "resumed")
    state.phase.encounter_paused = paused
    sync_cooldown(state, now)


def set_room_paused(state: SessionState, paused: bool, now: float) -> None:
    if state.phase.room_paused != paused:
        logger.debug("raid room %s", "paused" if paused else "resumed")
    state.phase.room_paused = paused
    sync_cooldown(state, now)


def _enter_combat_area(state: SessionState, now: float) -> None:
    state.phase.entered_room = True
    set_room_paused(state, False, now)


def apply_transition(state: SessionState, transition: Transition, now: float) -> bool:
    """Apply a chat-driven phase transition. Returns False if not a phase change."""
    if transition not in PHASE_TRANSITIONS:
        return False

    if transition in (Transition.WAVE_COMPLETED, Transition.DELVE_COMPLETED):
        set_encounter_paused(state, True, now)
    elif transition is Transition.WAVE_STARTED:
        regen.reseed(state.regen)
        set_encounter_paused(state, False, now)
    elif transition is Transition.REWARD_CLAIMED:
        set_encounter_paused(state, False, now)
    elif transition is Transition.ROOM_COMPLETED:
        # entered_room is left alone so standing in the finished room's
        # combat area cannot resume the cooldown; a new zone clears it.
        state.phase.inside_raid = True
        set_room_paused(state, True, now)
    elif transition is Transition.RAID_COMPLETED:
        set_room_paused(state, False, now)
    return True


def on_npc_spawned(
    state: SessionState, name: str | None, npc_id: int, config: TimerConfig, now: float
) -> None:
    if name is not None and config.delve_boss_marker in name:
        regen.reseed(state.regen, config.delve_reseed_offset)
        set_encounter_paused(state, False, now)

    phase = state.phase
    if npc_id == VERZIK.npc_id and phase.room_paused and not phase.entered_room:
        _enter_combat_area(state, now)


def on_menu_option(state: SessionState, option: str | None, now: float) -> None:
    phase = state.phase
    if not phase.inside_raid or not phase.room_paused or option is None:
        return

    if BEGIN_OPTION in option:
        set_room_paused(state, False, now)
        return

    position = phase.position
    if option == CONTINUE_OPTION and position is not None and position.zone_id == VERZIK.zone_id:
        set_room_paused(state, False, now)


def on_raid_state(state: SessionState, inside: bool, position: Position | None, now: float) -> None:
    """React to entering or leaving the raid. Repeats of the same value are ignored."""
    phase = state.phase
    if inside == phase.inside_raid:
        return

    phase.inside_raid = inside
    if inside:
        # Pause until a boss room is reached unless we are already in one.
        zone_id = position.zone_id if position is not None else None
        set_room_paused(state, room_at(zone_id) is None, now)
    else:
        set_room_paused(state, False, now)


def on_position(state: SessionState, position: Position, now: float) -> None:
    """Per-tick combat-area entry detection for raid rooms."""
    phase = state.phase
    phase.position = position
    room = room_at(position.zone_id)

    if position.zone_id != phase.zone_id:
        phase.entered_room = False
        if phase.room_paused and room is not None and room.entry is Entry.REGION:
            logger.debug("entered %s", room.name)
            _enter_combat_area(state, now)
        phase.zone_id = position.zone_id

    if phase.room_paused and not phase.entered_room and room is not None:
        if crossed_barrier(room, position):
            logger.debug("crossed the %s barrier", room.name)
            _enter_combat_area(state, now)
