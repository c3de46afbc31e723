from __future__ import annotations

from esper import World

from buff_notifications.components.buff_tracker import BuffTracker
from buff_notifications.components.game_context import GameContext
from buff_notifications.components.hud_log import HudLog
from buff_notifications.components.notification_config import NotificationConfig


def create_world(
    config: NotificationConfig | None = None,
    *,
    world_ready: bool = False,
) -> World:
    world = World()

    # Single state entity shared by the tracking, notification and config systems.
    world.create_entity(
        BuffTracker(),
        config or NotificationConfig(),
        GameContext(world_ready=world_ready),
        HudLog(),
    )
    return world


def get_state_entity(world: World) -> int:
    for entity, _ in world.get_component(BuffTracker):
        return entity
    raise KeyError("World has no buff tracker entity")


def get_config(world: World) -> NotificationConfig:
    for _, config in world.get_component(NotificationConfig):
        return config
    return NotificationConfig()


def get_hud_log(world: World) -> HudLog:
    for _, hud_log in world.get_component(HudLog):
        return hud_log
    raise KeyError("World has no HUD log")
