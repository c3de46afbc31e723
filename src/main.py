"""Headless entry point for Buff Notifications.

Replays a recorded sequence of buff snapshots through the event bus and
systems, printing each HUD message as the host would show it.

Replay file format (JSON)::

    {"samples": [
        {"buffs": [{"display_name": "Energized", "source": "Coffee",
                    "remaining_ms": 20000, "effects": {"Speed": 2}}]},
        {"buffs": null},
        {"event": "day_started"}
    ]}

Each ``buffs`` entry is one sampling interval; ``null`` means the host had no
data that tick. ``event`` entries emit ``day_started`` or ``save_loaded``.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from buff_notifications.constants import CHECK_FREQUENCY_TICKS
from buff_notifications.events.bus import (
    EVENT_DAY_STARTED,
    EVENT_GAME_LAUNCHED,
    EVENT_HUD_MESSAGE,
    EVENT_SAVE_LOADED,
    EVENT_UPDATE_TICKED,
    EVENT_WORLD_READY_CHANGED,
    EventBus,
)
from buff_notifications.systems.buff_notification_system import BuffNotificationSystem
from buff_notifications.systems.buff_tracking_system import BuffTrackingSystem
from buff_notifications.systems.notification_config_system import NotificationConfigSystem
from buff_notifications.world import create_world

HOST_EVENTS = {
    "day_started": EVENT_DAY_STARTED,
    "save_loaded": EVENT_SAVE_LOADED,
}


class ReplayHost:
    """Stands in for the game: hands out the snapshot recorded for the current sample."""

    def __init__(self) -> None:
        self.current: Any = None

    def snapshot(self):
        return self.current


def load_samples(path: Path) -> List[Any]:
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if isinstance(payload, dict):
        payload = payload.get("samples", [])
    if not isinstance(payload, list):
        raise ValueError(f"Replay file {path} must hold a list of samples")
    return payload


def run_replay(samples: Sequence[Any], *, config_path: Path | None = None) -> List[str]:
    event_bus = EventBus()
    world = create_world()
    host = ReplayHost()
    if config_path is not None:
        NotificationConfigSystem(world, event_bus, config_path=config_path)
    BuffTrackingSystem(world, event_bus, host.snapshot)
    BuffNotificationSystem(world, event_bus)

    lines: List[str] = []

    def _on_hud_message(sender, **payload):
        lines.append(payload["message"].text)

    event_bus.subscribe(EVENT_HUD_MESSAGE, _on_hud_message)
    event_bus.emit(EVENT_GAME_LAUNCHED)
    event_bus.emit(EVENT_WORLD_READY_CHANGED, ready=True)

    ticks = 0
    for sample in samples:
        if isinstance(sample, dict) and "event" in sample:
            name = HOST_EVENTS.get(sample["event"])
            if name is not None:
                event_bus.emit(name)
            continue
        host.current = sample.get("buffs") if isinstance(sample, dict) else sample
        ticks += CHECK_FREQUENCY_TICKS
        event_bus.emit(EVENT_UPDATE_TICKED, ticks=ticks)
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay buff snapshots and print notifications.")
    parser.add_argument("replay", type=Path, help="JSON file with recorded buff samples")
    parser.add_argument("--config", type=Path, default=None, help="config.json to load")
    parser.add_argument("--verbose", action="store_true", help="log reconciliation details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for line in run_replay(load_samples(args.replay), config_path=args.config):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
