from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class BuffKey:
    """Tracking identity of a buff: its display name paired with its source."""

    name: str
    source: str
