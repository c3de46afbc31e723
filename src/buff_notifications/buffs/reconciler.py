"""Diff the previous buff bookkeeping against a fresh host snapshot.

``reconcile`` is pure: it never mutates the tracker it is given and returns
the replacement tracker alongside the lifecycle events, in the order

* starts (grouped per source, sources alphabetically),
* expiry warnings,
* ends (one ``SourceEnded`` per source that fully disappeared),

each pass visiting buffs in ``BuffKey`` order so the output is reproducible.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Set, Tuple

from buff_notifications.buffs.events import (
    AdditionalBuffFromSource,
    BuffEnded,
    BuffEvent,
    ExpiringSoon,
    SourceEnded,
    SourceStarted,
)
from buff_notifications.buffs.sources import resolve_source
from buff_notifications.components.buff import Buff
from buff_notifications.components.buff_key import BuffKey
from buff_notifications.components.buff_tracker import BuffTracker
from buff_notifications.components.notification_config import NotificationConfig
from buff_notifications.constants import MS_PER_SECOND


def is_trackable(buff: Buff) -> bool:
    return bool(buff.display_name) and buff.remaining_ms > 0


def reconcile(
    snapshot: Iterable[Buff] | None,
    tracker: BuffTracker,
    config: NotificationConfig,
) -> Tuple[BuffTracker, List[BuffEvent]]:
    if snapshot is None:
        # Host had nothing to report; keep everything as it was.
        return tracker, []

    current_buffs: Dict[BuffKey, Buff] = {}
    current: Dict[BuffKey, int] = {}
    current_sources: Dict[str, Set[str]] = {}
    for buff in snapshot:
        if not is_trackable(buff):
            continue
        source = resolve_source(buff)
        key = BuffKey(buff.display_name, source)
        current_buffs[key] = buff
        current[key] = buff.remaining_ms // MS_PER_SECOND
        current_sources.setdefault(source, set()).add(buff.display_name)

    warned = set(tracker.warned)
    events: List[BuffEvent] = []
    events.extend(_detect_starts(current_buffs, tracker))
    events.extend(
        _detect_warnings(current_buffs, current, warned, config.warning_threshold_seconds)
    )
    events.extend(_detect_ends(tracker, current, current_sources, warned))

    new_tracker = BuffTracker(active=current, sources=current_sources, warned=warned)
    return new_tracker, events


def _detect_starts(current_buffs: Dict[BuffKey, Buff], tracker: BuffTracker) -> List[BuffEvent]:
    started: Dict[str, List[Buff]] = {}
    for key in sorted(current_buffs):
        if key in tracker.active:
            continue
        started.setdefault(key.source, []).append(current_buffs[key])

    events: List[BuffEvent] = []
    for source in sorted(started):
        buffs = started[source]
        if source in tracker.sources:
            events.extend(AdditionalBuffFromSource(source=source, buff=buff) for buff in buffs)
        else:
            events.append(SourceStarted(source=source, buffs=tuple(buffs)))
    return events


def _detect_warnings(
    current_buffs: Dict[BuffKey, Buff],
    current: Dict[BuffKey, int],
    warned: Set[BuffKey],
    threshold: int,
) -> List[BuffEvent]:
    events: List[BuffEvent] = []
    for key in sorted(current):
        seconds = current[key]
        if seconds > threshold or key in warned:
            continue
        warned.add(key)
        events.append(
            ExpiringSoon(buff=current_buffs[key], source=key.source, seconds_remaining=seconds)
        )
    return events


def _detect_ends(
    tracker: BuffTracker,
    current: Dict[BuffKey, int],
    current_sources: Dict[str, Set[str]],
    warned: Set[BuffKey],
) -> List[BuffEvent]:
    events: List[BuffEvent] = []
    ended_sources: Set[str] = set()
    for key in sorted(tracker.active):
        if key in current:
            continue
        warned.discard(key)
        if current_sources.get(key.source):
            events.append(BuffEnded(name=key.name, source=key.source))
        elif key.source not in ended_sources:
            ended_sources.add(key.source)
            events.append(SourceEnded(source=key.source))
    return events
