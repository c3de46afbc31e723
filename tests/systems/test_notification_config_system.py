import json
import logging
from pathlib import Path

import pytest

from buff_notifications.components.notification_config import NotificationConfig
from buff_notifications.events.bus import EVENT_CONFIG_CHANGED, EVENT_GAME_LAUNCHED, EventBus
from buff_notifications.systems.notification_config_system import (
    CONFIG_OPTIONS,
    NotificationConfigSystem,
    clamp_threshold,
)
from buff_notifications.world import create_world, get_config


def _write(path: Path, payload) -> None:
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload, encoding="utf-8")


def _read(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def test_missing_file_writes_defaults(tmp_path):
    config_path = Path(tmp_path) / "config.json"
    world = create_world()

    NotificationConfigSystem(world, EventBus(), config_path=config_path)

    assert get_config(world) == NotificationConfig()
    assert _read(config_path) == {
        "WarningThresholdSeconds": 10,
        "ShowBuffStartNotifications": True,
        "ShowBuffExpiringWarnings": True,
        "ShowBuffEndNotifications": True,
    }


def test_loads_saved_values(tmp_path):
    config_path = Path(tmp_path) / "config.json"
    _write(
        config_path,
        {
            "WarningThresholdSeconds": 25,
            "ShowBuffStartNotifications": False,
            "ShowBuffEndNotifications": "no",
            "SomethingElse": 1,
        },
    )
    world = create_world()

    NotificationConfigSystem(world, EventBus(), config_path=config_path)

    config = get_config(world)
    assert config.warning_threshold_seconds == 25
    assert config.show_buff_start_notifications is False
    assert config.show_buff_expiring_warnings is True
    assert config.show_buff_end_notifications is True


@pytest.mark.parametrize("raw, expected", [(120, 60), (0, 1), (-5, 1), ("15", 15), ("soon", 10), (None, 10), (float("inf"), 10), (float("nan"), 10)])
def test_threshold_is_clamped(raw, expected):
    assert clamp_threshold(raw) == expected


@pytest.mark.parametrize("contents", ["{not json", "[1, 2, 3]"])
def test_corrupt_file_restores_defaults(tmp_path, caplog, contents):
    config_path = Path(tmp_path) / "config.json"
    _write(config_path, contents)
    world = create_world(NotificationConfig(warning_threshold_seconds=42))

    with caplog.at_level(logging.WARNING):
        NotificationConfigSystem(world, EventBus(), config_path=config_path)

    assert get_config(world).warning_threshold_seconds == 10
    assert _read(config_path)["WarningThresholdSeconds"] == 10
    assert any("restoring defaults" in message for message in caplog.messages)


def test_set_option_clamps_saves_and_announces(tmp_path):
    config_path = Path(tmp_path) / "config.json"
    bus = EventBus()
    world = create_world()
    system = NotificationConfigSystem(world, bus, config_path=config_path, load_existing=False)
    changes = []
    bus.subscribe(EVENT_CONFIG_CHANGED, lambda sender, **payload: changes.append(payload))

    assert system.set_option("warning_threshold_seconds", 90) == 60
    system.set_option("show_buff_expiring_warnings", False)

    assert get_config(world).warning_threshold_seconds == 60
    assert _read(config_path)["ShowBuffExpiringWarnings"] is False
    assert changes == [
        {"field": "warning_threshold_seconds", "value": 60},
        {"field": "show_buff_expiring_warnings", "value": False},
    ]


def test_set_unknown_option_raises(tmp_path):
    system = NotificationConfigSystem(
        create_world(), EventBus(), config_path=Path(tmp_path) / "config.json", load_existing=False
    )
    with pytest.raises(KeyError):
        system.set_option("show_fireworks", True)


def test_reset_restores_defaults(tmp_path):
    config_path = Path(tmp_path) / "config.json"
    world = create_world()
    system = NotificationConfigSystem(world, EventBus(), config_path=config_path, load_existing=False)
    system.set_option("warning_threshold_seconds", 3)
    system.set_option("show_buff_end_notifications", False)

    system.reset_config()

    assert get_config(world) == NotificationConfig()
    assert _read(config_path)["WarningThresholdSeconds"] == 10


def test_options_describe_menu(tmp_path, caplog):
    bus = EventBus()
    system = NotificationConfigSystem(
        create_world(), bus, config_path=Path(tmp_path) / "config.json", load_existing=False
    )

    with caplog.at_level(logging.INFO):
        bus.emit(EVENT_GAME_LAUNCHED)

    threshold = system.options()[0]
    assert threshold.name == "Warning Threshold (seconds)"
    assert (threshold.minimum, threshold.maximum, threshold.interval) == (1, 60, 1)
    assert [option.section for option in CONFIG_OPTIONS] == [
        "General Settings",
        "Notification Settings",
        "Notification Settings",
        "Notification Settings",
    ]
    assert "Registered 4 config options" in caplog.messages


def test_infinite_threshold_in_file_falls_back_to_default(tmp_path):
    config_path = Path(tmp_path) / "config.json"
    _write(config_path, '{"WarningThresholdSeconds": Infinity, "ShowBuffEndNotifications": false}')
    world = create_world()

    NotificationConfigSystem(world, EventBus(), config_path=config_path)

    config = get_config(world)
    assert config.warning_threshold_seconds == 10
    assert config.show_buff_end_notifications is False


def test_game_launched_handler_is_public(tmp_path, caplog):
    system = NotificationConfigSystem(
        create_world(), EventBus(), config_path=Path(tmp_path) / "config.json", load_existing=False
    )

    with caplog.at_level(logging.INFO):
        system.on_game_launched(None)

    assert "Registered 4 config options" in caplog.messages
