import json
from pathlib import Path

from main import main, run_replay


SAMPLES = [
    {"buffs": [{"display_name": "Energized", "source": "Coffee", "remaining_ms": 20000, "effects": {"Speed": 2}}]},
    {"buffs": [{"display_name": "Energized", "source": "Coffee", "remaining_ms": 9000, "effects": {"Speed": 2}}]},
    {"buffs": None},
    {"buffs": []},
    {"event": "day_started"},
    {"buffs": [{"display_name": "Energized", "source": "Coffee", "remaining_ms": 20000, "effects": {"Speed": 2}}]},
]


def test_run_replay_produces_hud_lines():
    assert run_replay(SAMPLES) == [
        "Coffee Buffs (Speed +2)",
        "Coffee buff Energized expiring in 9 seconds!",
        "Coffee buffs have ended.",
        "Coffee Buffs (Speed +2)",
    ]


def test_run_replay_honours_config_file(tmp_path):
    config_path = Path(tmp_path) / "config.json"
    config_path.write_text(json.dumps({"ShowBuffExpiringWarnings": False}), encoding="utf-8")

    lines = run_replay(SAMPLES, config_path=config_path)

    assert not any("expiring" in line for line in lines)


def test_main_prints_notifications(tmp_path, capsys):
    replay_path = Path(tmp_path) / "replay.json"
    replay_path.write_text(json.dumps({"samples": SAMPLES[:2]}), encoding="utf-8")

    assert main([str(replay_path)]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "Coffee Buffs (Speed +2)",
        "Coffee buff Energized expiring in 9 seconds!",
    ]
