from __future__ import annotations

from operator import attrgetter
from typing import Callable, Sequence, Tuple

from buff_notifications.components.buff import Buff, BuffEffects

# Display order is fixed; notifications and tests depend on it.
EFFECT_FIELDS: Sequence[Tuple[str, str]] = (
    ("Farming", "farming_level"),
    ("Fishing", "fishing_level"),
    ("Mining", "mining_level"),
    ("Luck", "luck_level"),
    ("Foraging", "foraging_level"),
    ("Max Energy", "max_stamina"),
    ("Magnetism", "magnetic_radius"),
    ("Speed", "speed"),
    ("Defense", "defense"),
    ("Attack", "attack"),
)

EFFECT_LABELS: Sequence[Tuple[str, Callable[[BuffEffects], int]]] = tuple(
    (label, attrgetter(field_name)) for label, field_name in EFFECT_FIELDS
)


def format_delta(label: str, value: int) -> str:
    sign = "+" if value > 0 else ""
    return f"{label} {sign}{value}"


def describe(target: Buff | BuffEffects | None) -> str:
    """Summarise the nonzero stat deltas of a buff, e.g. ``"Speed +2, Luck -1"``.

    Returns an empty string when the buff changes no stat.
    """

    effects = target.effects if isinstance(target, Buff) else target
    if effects is None:
        return ""
    parts = []
    for label, accessor in EFFECT_LABELS:
        value = accessor(effects) or 0
        if value:
            parts.append(format_delta(label, value))
    return ", ".join(parts)
