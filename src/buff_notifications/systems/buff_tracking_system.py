from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from esper import World

from buff_notifications.buffs.events import BuffEvent
from buff_notifications.buffs.payload import normalize_snapshot
from buff_notifications.buffs.reconciler import reconcile
from buff_notifications.components.buff import Buff
from buff_notifications.components.buff_tracker import BuffTracker
from buff_notifications.components.game_context import GameContext
from buff_notifications.constants import CHECK_FREQUENCY_TICKS
from buff_notifications.events.bus import (
    EVENT_BUFFS_RESET,
    EVENT_DAY_STARTED,
    EVENT_SAVE_LOADED,
    EVENT_UPDATE_TICKED,
    EVENT_WORLD_READY_CHANGED,
    EventBus,
)
from buff_notifications.world import get_config, get_state_entity

logger = logging.getLogger(__name__)

SnapshotProvider = Callable[[], Optional[Iterable[Union[Buff, Mapping[str, Any]]]]]


class BuffTrackingSystem:
    """Samples the player's active buffs and publishes their lifecycle events."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        snapshot_provider: SnapshotProvider,
        *,
        check_frequency_ticks: int = CHECK_FREQUENCY_TICKS,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._snapshot_provider = snapshot_provider
        self._check_frequency = max(1, int(check_frequency_ticks))
        self._state_entity = get_state_entity(world)
        self.event_bus.subscribe(EVENT_UPDATE_TICKED, self.on_update_ticked)
        self.event_bus.subscribe(EVENT_DAY_STARTED, self.on_day_started)
        self.event_bus.subscribe(EVENT_SAVE_LOADED, self.on_save_loaded)
        self.event_bus.subscribe(EVENT_WORLD_READY_CHANGED, self.on_world_ready_changed)
        logger.info("Buff Notifications initialized")

    @property
    def tracker(self) -> BuffTracker:
        return self.world.component_for_entity(self._state_entity, BuffTracker)

    @property
    def world_ready(self) -> bool:
        return self.world.component_for_entity(self._state_entity, GameContext).world_ready

    def on_update_ticked(self, sender, **payload):
        ticks = payload.get("ticks")
        if ticks is None:
            return
        try:
            ticks = int(ticks)
        except (TypeError, ValueError):
            return
        if ticks % self._check_frequency != 0:
            return
        if not self.world_ready:
            return
        self.check_buffs()

    def on_world_ready_changed(self, sender, **payload):
        context = self.world.component_for_entity(self._state_entity, GameContext)
        context.world_ready = bool(payload.get("ready", False))

    def on_day_started(self, sender, **payload):
        self.reset_all(reason=EVENT_DAY_STARTED)

    def on_save_loaded(self, sender, **payload):
        self.reset_all(reason=EVENT_SAVE_LOADED)

    def check_buffs(self) -> List[BuffEvent]:
        return self.apply_snapshot(self._snapshot_provider())

    def apply_snapshot(self, records: Iterable[Buff | Mapping[str, Any]] | None) -> List[BuffEvent]:
        snapshot = normalize_snapshot(records)
        if snapshot is None:
            logger.debug("No buff data this tick; tracked state unchanged")
            return []
        tracker, events = reconcile(snapshot, self.tracker, get_config(self.world))
        self.world.add_component(self._state_entity, tracker)
        if events:
            logger.debug(
                "Reconciled %d active buffs into %d events", len(tracker.active), len(events)
            )
        for event in events:
            self.event_bus.emit(event.event_name, event=event)
        return events

    def reset_all(self, reason: str = "reset") -> None:
        self.tracker.clear()
        logger.debug("Cleared tracked buffs (%s)", reason)
        self.event_bus.emit(EVENT_BUFFS_RESET, reason=reason)
