from __future__ import annotations

from typing import Dict, Iterable

from buff_notifications.buffs.effects import describe
from buff_notifications.buffs.events import (
    AdditionalBuffFromSource,
    BuffEnded,
    BuffEvent,
    ExpiringSoon,
    SourceEnded,
    SourceStarted,
)
from buff_notifications.components.buff import Buff
from buff_notifications.constants import (
    CATEGORY_END,
    CATEGORY_START,
    CATEGORY_WARNING,
    ENDING_ICON,
    NO_VISIBLE_EFFECTS,
    STARTING_ICON,
    WARNING_ICON,
)

CATEGORY_ICONS: Dict[str, int] = {
    CATEGORY_START: STARTING_ICON,
    CATEGORY_WARNING: WARNING_ICON,
    CATEGORY_END: ENDING_ICON,
}


def effects_summary(buffs: Iterable[Buff]) -> str:
    descriptions = [text for text in (describe(buff) for buff in buffs) if text]
    if not descriptions:
        return NO_VISIBLE_EFFECTS
    return ", ".join(descriptions)


def format_message(event: BuffEvent) -> str:
    if isinstance(event, SourceStarted):
        return f"{event.source} Buffs ({effects_summary(event.buffs)})"
    if isinstance(event, AdditionalBuffFromSource):
        return (
            f"{event.source} Buffs: {event.buff.display_name} "
            f"({effects_summary((event.buff,))})"
        )
    if isinstance(event, ExpiringSoon):
        return (
            f"{event.source} buff {event.buff.display_name} "
            f"expiring in {event.seconds_remaining} seconds!"
        )
    if isinstance(event, BuffEnded):
        return f"{event.source} buff {event.name} has ended."
    if isinstance(event, SourceEnded):
        return f"{event.source} buffs have ended."
    raise TypeError(f"Unsupported buff event {event!r}")
