"""Event reducer routing inbound signals to the timers and phase tracker."""
from __future__ import annotations

import logging
from typing import Callable

from tick_spectimer import cooldown, phase, regen
from tick_spectimer.config import TimerConfig
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
from tick_spectimer.rules import MessageRules, Transition, default_rules, strip_tags
from tick_spectimer.types import SessionState

logger = logging.getLogger(__name__)

_Handler = Callable[..., None]

_DEFAULT_RULES = default_rules()


def reset(state: SessionState, config: TimerConfig) -> None:
    """Discard all timer and phase state in place. Safe to repeat."""
    fresh = SessionState.initial(config)
    state.regen = fresh.regen
    state.phase = fresh.phase
    state.cooldown = fresh.cooldown
    state.tick_index = fresh.tick_index


def _on_session_started(
    state: SessionState, event: SessionStarted, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    reset(state, config)
    state.logged_in = True
    if event.energy is not None:
        state.regen.last_energy = config.clamp_energy(event.energy)
    logger.debug("session started")


def _on_session_ended(
    state: SessionState, event: SessionEnded, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    reset(state, config)
    state.logged_in = False
    logger.debug("session ended")


def _on_tick(
    state: SessionState, event: Tick, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    if not state.logged_in:
        return
    state.tick_index = event.tick_index
    regen.on_tick(
        state.regen,
        event.energy,
        event.tick_index,
        state.phase.encounter_paused,
        config,
    )
    if event.position is not None:
        phase.on_position(state, event.position, now)


def _on_chat_message(
    state: SessionState, event: ChatMessage, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    if not state.logged_in or event.text is None:
        return

    transition = rules.match(strip_tags(event.text))
    if transition is None:
        return
    if phase.apply_transition(state, transition, now):
        return

    tick_index = event.tick_index if event.tick_index is not None else state.tick_index
    if transition is Transition.SURGE_POTION:
        regen.open_ignore_window(state.regen, tick_index, config.surge_restore, config)
        cooldown.start(
            state.cooldown,
            config.cooldown_seconds,
            state.phase.cooldown_paused,
            now,
        )
    elif transition is Transition.DEATH_CHARGE:
        regen.open_ignore_window(state.regen, tick_index, config.death_charge_restore, config)
    elif transition is Transition.COOLDOWN_EXPIRED:
        cooldown.clear(state.cooldown)
        logger.debug("cooldown expired")


def _on_equipment_changed(
    state: SessionState, event: EquipmentChanged, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    regen.set_accelerated(state.regen, event.accelerant, config)


def _on_npc_spawned(
    state: SessionState, event: NpcSpawned, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    phase.on_npc_spawned(state, event.name, event.npc_id, config, now)


def _on_menu_option_clicked(
    state: SessionState, event: MenuOptionClicked, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    phase.on_menu_option(state, event.option, now)


def _on_raid_state_changed(
    state: SessionState, event: RaidStateChanged, config: TimerConfig, now: float, rules: MessageRules
) -> None:
    inside = event.state in config.raid_active_states
    position = event.position if event.position is not None else state.phase.position
    phase.on_raid_state(state, inside, position, now)


_HANDLERS: dict[type, _Handler] = {
    SessionStarted: _on_session_started,
    SessionEnded: _on_session_ended,
    Tick: _on_tick,
    ChatMessage: _on_chat_message,
    EquipmentChanged: _on_equipment_changed,
    NpcSpawned: _on_npc_spawned,
    MenuOptionClicked: _on_menu_option_clicked,
    RaidStateChanged: _on_raid_state_changed,
}


def apply_event(
    state: SessionState,
    event: Event,
    config: TimerConfig,
    now: float,
    rules: MessageRules | None = None,
) -> SessionState:
    """Apply one event to ``state`` in place and return it.

    ``now`` is the wall-clock reading used by the cooldown. Events of an
    unknown type are ignored.
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        logger.debug("ignoring unknown event %r", event)
        return state
    handler(state, event, config, now, rules if rules is not None else _DEFAULT_RULES)
    return state
