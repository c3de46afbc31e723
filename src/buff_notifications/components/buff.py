from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class BuffEffects:
    """Signed stat deltas a buff applies while it is active."""

    farming_level: int = 0
    fishing_level: int = 0
    mining_level: int = 0
    luck_level: int = 0
    foraging_level: int = 0
    max_stamina: int = 0
    magnetic_radius: int = 0
    speed: int = 0
    defense: int = 0
    attack: int = 0


@dataclass(frozen=True, slots=True)
class Buff:
    """One timed status effect as reported by the host in a snapshot.

    ``remaining_ms`` counts down in real milliseconds; buffs reporting zero are
    instant or inert and never tracked.
    """

    id: str
    display_name: str
    remaining_ms: int
    source: str | None = None
    description: str | None = None
    effects: BuffEffects = field(default_factory=BuffEffects)
