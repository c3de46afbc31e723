from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from buff_notifications.constants import HUD_LOG_LIMIT


@dataclass(frozen=True, slots=True)
class HudMessage:
    """A notification ready for the host to draw: text plus HUD icon number."""

    text: str
    icon: int
    category: str


@dataclass(slots=True)
class HudLog:
    """Most recent messages shown, oldest first, capped at ``limit``."""

    messages: List[HudMessage] = field(default_factory=list)
    limit: int = HUD_LOG_LIMIT

    def record(self, message: HudMessage) -> None:
        self.messages.append(message)
        overflow = len(self.messages) - max(1, self.limit)
        if overflow > 0:
            del self.messages[:overflow]
