from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from buff_notifications.buffs.effects import EFFECT_FIELDS
from buff_notifications.components.buff import Buff, BuffEffects

_EFFECT_FIELDS = frozenset(field_name for _label, field_name in EFFECT_FIELDS)
# Hosts may key stat deltas by display label ("Max Energy") instead of field name.
_LABEL_TO_FIELD: Dict[str, str] = dict(EFFECT_FIELDS)


def _as_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def effects_from_payload(raw: Any) -> BuffEffects:
    if isinstance(raw, BuffEffects):
        return raw
    if not isinstance(raw, Mapping):
        return BuffEffects()
    values: Dict[str, int] = {}
    for name, value in raw.items():
        field_name = name if name in _EFFECT_FIELDS else _LABEL_TO_FIELD.get(name)
        if field_name is None:
            continue
        values[field_name] = _as_int(value)
    return BuffEffects(**values)


def buff_from_payload(payload: Mapping[str, Any]) -> Buff:
    """Build a ``Buff`` from a loosely shaped host record.

    Missing or malformed fields fall back to empty text or zero, so a bad record
    turns into a buff the reconciler filters out rather than an error.
    """

    name = payload.get("display_name")
    if name is None:
        name = payload.get("name")
    remaining = payload.get("remaining_ms")
    if remaining is None:
        remaining = payload.get("millisecondsDuration")
    source = payload.get("source")
    description = payload.get("description")
    return Buff(
        id=_as_text(payload.get("id")),
        display_name=_as_text(name),
        remaining_ms=_as_int(remaining),
        source=_as_text(source) or None,
        description=_as_text(description) or None,
        effects=effects_from_payload(payload.get("effects")),
    )


def normalize_snapshot(records: Iterable[Buff | Mapping[str, Any]] | None) -> List[Buff] | None:
    if records is None:
        return None
    buffs: List[Buff] = []
    for record in records:
        if isinstance(record, Buff):
            buffs.append(record)
        elif isinstance(record, Mapping):
            buffs.append(buff_from_payload(record))
    return buffs
