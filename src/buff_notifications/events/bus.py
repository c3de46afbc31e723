from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# HOST GAME LOOP
# ============================================================================
EVENT_GAME_LAUNCHED = "game_launched"      # payload: None
EVENT_UPDATE_TICKED = "update_ticked"      # payload: ticks=int
EVENT_DAY_STARTED = "day_started"          # payload: None
EVENT_SAVE_LOADED = "save_loaded"          # payload: None
EVENT_WORLD_READY_CHANGED = "world_ready_changed"  # payload: ready=bool


# ============================================================================
# BUFF LIFECYCLE
# ============================================================================
EVENT_BUFF_SOURCE_STARTED = "buff_source_started"    # payload: event=SourceStarted
EVENT_BUFF_ADDED_TO_SOURCE = "buff_added_to_source"  # payload: event=AdditionalBuffFromSource
EVENT_BUFF_EXPIRING = "buff_expiring"                # payload: event=ExpiringSoon
EVENT_BUFF_ENDED = "buff_ended"                      # payload: event=BuffEnded
EVENT_BUFF_SOURCE_ENDED = "buff_source_ended"        # payload: event=SourceEnded
EVENT_BUFFS_RESET = "buffs_reset"                    # payload: reason=str


# ============================================================================
# NOTIFICATIONS & CONFIG
# ============================================================================
EVENT_HUD_MESSAGE = "hud_message"          # payload: message=HudMessage
EVENT_CONFIG_CHANGED = "config_changed"    # payload: field=str, value=int|bool
