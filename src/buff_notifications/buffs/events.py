"""Lifecycle events produced by reconciling a buff snapshot.

Each event carries everything a dispatcher needs to format a message and pick
a HUD category without looking back at tracker state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from buff_notifications.components.buff import Buff
from buff_notifications.constants import CATEGORY_END, CATEGORY_START, CATEGORY_WARNING
from buff_notifications.events.bus import (
    EVENT_BUFF_ADDED_TO_SOURCE,
    EVENT_BUFF_ENDED,
    EVENT_BUFF_EXPIRING,
    EVENT_BUFF_SOURCE_ENDED,
    EVENT_BUFF_SOURCE_STARTED,
)


@dataclass(frozen=True, slots=True)
class SourceStarted:
    """First buffs from a source not active in the previous sample."""

    category: ClassVar[str] = CATEGORY_START
    event_name: ClassVar[str] = EVENT_BUFF_SOURCE_STARTED

    source: str
    buffs: Tuple[Buff, ...]


@dataclass(frozen=True, slots=True)
class AdditionalBuffFromSource:
    """A new buff from a source that already had active buffs."""

    category: ClassVar[str] = CATEGORY_START
    event_name: ClassVar[str] = EVENT_BUFF_ADDED_TO_SOURCE

    source: str
    buff: Buff


@dataclass(frozen=True, slots=True)
class ExpiringSoon:
    category: ClassVar[str] = CATEGORY_WARNING
    event_name: ClassVar[str] = EVENT_BUFF_EXPIRING

    buff: Buff
    source: str
    seconds_remaining: int


@dataclass(frozen=True, slots=True)
class BuffEnded:
    """One buff ended while others from its source remain active."""

    category: ClassVar[str] = CATEGORY_END
    event_name: ClassVar[str] = EVENT_BUFF_ENDED

    name: str
    source: str


@dataclass(frozen=True, slots=True)
class SourceEnded:
    """Every buff from the source is gone."""

    category: ClassVar[str] = CATEGORY_END
    event_name: ClassVar[str] = EVENT_BUFF_SOURCE_ENDED

    source: str


BuffEvent = Union[SourceStarted, AdditionalBuffFromSource, ExpiringSoon, BuffEnded, SourceEnded]
