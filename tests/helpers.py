from __future__ import annotations

from buff_notifications.components.buff import Buff, BuffEffects
from buff_notifications.components.buff_tracker import BuffTracker


def make_buff(
    name: str,
    source: str | None,
    remaining_ms: int,
    *,
    description: str | None = None,
    buff_id: str | None = None,
    **effects: int,
) -> Buff:
    """Build a snapshot buff; stat deltas are given by ``BuffEffects`` field name."""

    return Buff(
        id=buff_id or f"{source}:{name}",
        display_name=name,
        remaining_ms=remaining_ms,
        source=source,
        description=description,
        effects=BuffEffects(**effects),
    )


def assert_tracker_consistent(tracker: BuffTracker) -> None:
    """Check the index mirrors the active keys and warnings only cover active buffs."""

    from_active: dict[str, set[str]] = {}
    for key in tracker.active:
        from_active.setdefault(key.source, set()).add(key.name)
    assert from_active == tracker.sources
    assert tracker.warned <= set(tracker.active)
