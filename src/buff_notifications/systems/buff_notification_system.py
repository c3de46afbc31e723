from __future__ import annotations

import logging

from esper import World

from buff_notifications.buffs.events import BuffEvent
from buff_notifications.buffs.messages import CATEGORY_ICONS, format_message
from buff_notifications.components.hud_log import HudMessage
from buff_notifications.components.notification_config import NotificationConfig
from buff_notifications.constants import CATEGORY_END, CATEGORY_START, CATEGORY_WARNING
from buff_notifications.events.bus import (
    EVENT_BUFF_ADDED_TO_SOURCE,
    EVENT_BUFF_ENDED,
    EVENT_BUFF_EXPIRING,
    EVENT_BUFF_SOURCE_ENDED,
    EVENT_BUFF_SOURCE_STARTED,
    EVENT_HUD_MESSAGE,
    EventBus,
)
from buff_notifications.world import get_config, get_hud_log

logger = logging.getLogger(__name__)


def category_enabled(category: str, config: NotificationConfig) -> bool:
    if category == CATEGORY_START:
        return config.show_buff_start_notifications
    if category == CATEGORY_WARNING:
        return config.show_buff_expiring_warnings
    if category == CATEGORY_END:
        return config.show_buff_end_notifications
    return False


class BuffNotificationSystem:
    """Turns buff lifecycle events into HUD messages, honouring the config switches."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        for event_name in (
            EVENT_BUFF_SOURCE_STARTED,
            EVENT_BUFF_ADDED_TO_SOURCE,
            EVENT_BUFF_EXPIRING,
            EVENT_BUFF_ENDED,
            EVENT_BUFF_SOURCE_ENDED,
        ):
            self.event_bus.subscribe(event_name, self.on_buff_event)

    def on_buff_event(self, sender, **payload):
        event = payload.get("event")
        if event is None:
            return
        if not category_enabled(event.category, get_config(self.world)):
            logger.debug("Suppressed %s notification for %s", event.category, event.source)
            return
        self.notify(event)

    def notify(self, event: BuffEvent) -> HudMessage:
        message = HudMessage(
            text=format_message(event),
            icon=CATEGORY_ICONS[event.category],
            category=event.category,
        )
        get_hud_log(self.world).record(message)
        logger.info(message.text)
        self.event_bus.emit(EVENT_HUD_MESSAGE, message=message)
        return message
