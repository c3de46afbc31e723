# Host update loop runs at 60 ticks per second; sample buffs twice a second.
CHECK_FREQUENCY_TICKS = 30
MS_PER_SECOND = 1000

UNKNOWN_SOURCE = "unknown source"
NO_VISIBLE_EFFECTS = "No visible effects"

# HUD message icon numbers understood by the host.
STARTING_ICON = 1
WARNING_ICON = 2
ENDING_ICON = 3

CATEGORY_START = "start"
CATEGORY_WARNING = "warning"
CATEGORY_END = "end"

DEFAULT_WARNING_THRESHOLD_SECONDS = 10
WARNING_THRESHOLD_MIN = 1
WARNING_THRESHOLD_MAX = 60

CONFIG_FILE_NAME = "config.json"

# Oldest HUD messages are dropped past this many.
HUD_LOG_LIMIT = 100
