from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from esper import World

from buff_notifications.components.notification_config import NotificationConfig
from buff_notifications.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_WARNING_THRESHOLD_SECONDS,
    WARNING_THRESHOLD_MAX,
    WARNING_THRESHOLD_MIN,
)
from buff_notifications.events.bus import EVENT_CONFIG_CHANGED, EVENT_GAME_LAUNCHED, EventBus
from buff_notifications.world import get_state_entity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConfigOption:
    """Menu entry describing one editable setting."""

    field: str
    name: str
    tooltip: str
    section: str
    minimum: int | None = None
    maximum: int | None = None
    interval: int | None = None


CONFIG_OPTIONS: Tuple[ConfigOption, ...] = (
    ConfigOption(
        field="warning_threshold_seconds",
        name="Warning Threshold (seconds)",
        tooltip="How many seconds before a buff expires to show a warning",
        section="General Settings",
        minimum=WARNING_THRESHOLD_MIN,
        maximum=WARNING_THRESHOLD_MAX,
        interval=1,
    ),
    ConfigOption(
        field="show_buff_start_notifications",
        name="Show Buff Start Notifications",
        tooltip="Whether to show notifications when buffs are activated",
        section="Notification Settings",
    ),
    ConfigOption(
        field="show_buff_expiring_warnings",
        name="Show Buff Expiring Warnings",
        tooltip="Whether to show warnings when buffs are about to expire",
        section="Notification Settings",
    ),
    ConfigOption(
        field="show_buff_end_notifications",
        name="Show Buff End Notifications",
        tooltip="Whether to show notifications when buffs have ended",
        section="Notification Settings",
    ),
)

# Keys as they appear in config.json.
CONFIG_KEYS: Dict[str, str] = {
    "warning_threshold_seconds": "WarningThresholdSeconds",
    "show_buff_start_notifications": "ShowBuffStartNotifications",
    "show_buff_expiring_warnings": "ShowBuffExpiringWarnings",
    "show_buff_end_notifications": "ShowBuffEndNotifications",
}


def clamp_threshold(value: Any) -> int:
    try:
        seconds = int(value)
    except (TypeError, ValueError, OverflowError):
        seconds = DEFAULT_WARNING_THRESHOLD_SECONDS
    return max(WARNING_THRESHOLD_MIN, min(WARNING_THRESHOLD_MAX, seconds))


def _coerce(field_name: str, value: Any, default: Any) -> Any:
    if field_name == "warning_threshold_seconds":
        return clamp_threshold(value)
    if isinstance(value, bool):
        return value
    return default


class NotificationConfigSystem:
    """Loads, edits and persists the notification settings."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        config_path: Path | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._config_path = Path(config_path) if config_path is not None else self._default_config_path()
        self._state_entity = get_state_entity(world)

        self.event_bus.subscribe(EVENT_GAME_LAUNCHED, self.on_game_launched)

        if load_existing:
            self.load_config()
        else:
            self.save_config()

    @staticmethod
    def _default_config_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / CONFIG_FILE_NAME

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def config(self) -> NotificationConfig:
        return self.world.component_for_entity(self._state_entity, NotificationConfig)

    def options(self) -> Tuple[ConfigOption, ...]:
        return CONFIG_OPTIONS

    def load_config(self) -> None:
        try:
            with self._config_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            self._apply_defaults()
            self.save_config()
            return
        except json.JSONDecodeError:
            logger.warning("Config file %s is not valid JSON; restoring defaults", self._config_path)
            self._apply_defaults()
            self.save_config()
            return
        if not isinstance(payload, dict):
            logger.warning("Config file %s does not hold an object; restoring defaults", self._config_path)
            self._apply_defaults()
            self.save_config()
            return
        config = self.config
        defaults = NotificationConfig()
        for field_name, key in CONFIG_KEYS.items():
            default = getattr(defaults, field_name)
            setattr(config, field_name, _coerce(field_name, payload.get(key, default), default))
        logger.info("Loaded notification config from %s", self._config_path)

    def save_config(self) -> None:
        config = self.config
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with self._config_path.open("w", encoding="utf-8") as handle:
            json.dump(
                {key: getattr(config, field_name) for field_name, key in CONFIG_KEYS.items()},
                handle,
                indent=2,
            )
        logger.info("Saved notification config to %s", self._config_path)

    def reset_config(self) -> None:
        self._apply_defaults()
        self.save_config()

    def set_option(self, field_name: str, value: Any) -> Any:
        if field_name not in CONFIG_KEYS:
            raise KeyError(f"Unknown config option '{field_name}'")
        config = self.config
        current = getattr(config, field_name)
        coerced = _coerce(field_name, value, current)
        setattr(config, field_name, coerced)
        self.save_config()
        self.event_bus.emit(EVENT_CONFIG_CHANGED, field=field_name, value=coerced)
        return coerced

    def _apply_defaults(self) -> None:
        config = self.config
        defaults = NotificationConfig()
        for field_name in CONFIG_KEYS:
            setattr(config, field_name, getattr(defaults, field_name))

    # Event handlers -----------------------------------------------------

    def on_game_launched(self, sender, **payload) -> None:
        for option in CONFIG_OPTIONS:
            logger.debug("Registered config option %s (%s)", option.name, option.section)
        logger.info("Registered %d config options", len(CONFIG_OPTIONS))
