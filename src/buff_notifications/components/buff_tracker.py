from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set

from buff_notifications.components.buff_key import BuffKey


@dataclass(slots=True)
class BuffTracker:
    """Buff bookkeeping as of the last reconciliation.

    ``active`` and ``sources`` always describe the same set of buffs and are
    replaced together. ``warned`` only ever holds keys present in ``active``.
    """

    active: Dict[BuffKey, int] = field(default_factory=dict)
    sources: Dict[str, Set[str]] = field(default_factory=dict)
    warned: Set[BuffKey] = field(default_factory=set)

    def is_empty(self) -> bool:
        return not self.active and not self.sources and not self.warned

    def clear(self) -> None:
        self.active.clear()
        self.sources.clear()
        self.warned.clear()
