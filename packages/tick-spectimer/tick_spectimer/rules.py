"""MessageRules registry mapping chat text to phase transitions.

Rules are tried in registration order and the first match wins. Each
matcher is a pure predicate over tag-stripped message text.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Callable

Matcher = Callable[[str], bool]

_TAG_RE = re.compile(r"<[^>]*>")

WAVE_START = r"Wave: (1[0-2]|[1-9])"
WAVE_COMPLETED = r"Wave (1[0-2]|[1-9]) completed!.*"
CLAIM_REWARDS = "Search the chest nearby"
DELVE_COMPLETED = r"Delve level: \d+ duration:.*"
ROOM_COMPLETED = r"Wave '.*' \(.*\) complete!.*"
RAID_COMPLETED = r"Theatre of Blood total completion time:.*"
SURGE_POTION = "You drink some of your surge potion."
DEATH_CHARGE = "Some of your special attack energy has been restored"
COOLDOWN_EXPIRED = "You now feel capable of drinking another dose of surge potion."


class Transition(Enum):
    WAVE_COMPLETED = "wave_completed"
    WAVE_STARTED = "wave_started"
    REWARD_CLAIMED = "reward_claimed"
    DELVE_COMPLETED = "delve_completed"
    ROOM_COMPLETED = "room_completed"
    RAID_COMPLETED = "raid_completed"
    SURGE_POTION = "surge_potion"
    DEATH_CHARGE = "death_charge"
    COOLDOWN_EXPIRED = "cooldown_expired"


def strip_tags(text: str) -> str:
    """Remove ``<col=ff0000>``-style markup from a chat message."""
    return _TAG_RE.sub("", text)


def pattern(regex: str) -> Matcher:
    compiled = re.compile(regex)
    return lambda text: compiled.fullmatch(text) is not None


def contains(fragment: str) -> Matcher:
    return lambda text: fragment in text


def exact(message: str) -> Matcher:
    return lambda text: text == message


class MessageRules:
    """Maps rule names to a matcher and the transition it produces."""

    def __init__(self) -> None:
        self._rules: dict[str, tuple[Matcher, Transition]] = {}

    def register(self, name: str, matcher: Matcher, transition: Transition) -> None:
        """Register a named rule. Overwrites in place if already registered."""
        self._rules[name] = (matcher, transition)

    def match(self, text: str) -> Transition | None:
        """Return the transition of the first matching rule, or None."""
        for matcher, transition in self._rules.values():
            if matcher(text):
                return transition
        return None

    def transition(self, name: str) -> Transition:
        """Look up a rule's transition. Raises KeyError if not registered."""
        return self._rules[name][1]

    def has(self, name: str) -> bool:
        return name in self._rules

    def names(self) -> list[str]:
        """List rule names in priority order."""
        return list(self._rules)


def default_rules() -> MessageRules:
    """Rules for the colosseum, delves, the raid, and energy restores."""
    rules = MessageRules()
    rules.register("wave_completed", pattern(WAVE_COMPLETED), Transition.WAVE_COMPLETED)
    rules.register("wave_started", pattern(WAVE_START), Transition.WAVE_STARTED)
    rules.register("reward_claimed", contains(CLAIM_REWARDS), Transition.REWARD_CLAIMED)
    rules.register("delve_completed", pattern(DELVE_COMPLETED), Transition.DELVE_COMPLETED)
    rules.register("room_completed", pattern(ROOM_COMPLETED), Transition.ROOM_COMPLETED)
    rules.register("raid_completed", pattern(RAID_COMPLETED), Transition.RAID_COMPLETED)
    rules.register("surge_potion", exact(SURGE_POTION), Transition.SURGE_POTION)
    rules.register("death_charge", contains(DEATH_CHARGE), Transition.DEATH_CHARGE)
    rules.register("cooldown_expired", exact(COOLDOWN_EXPIRED), Transition.COOLDOWN_EXPIRED)
    return rules
