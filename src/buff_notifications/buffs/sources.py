from __future__ import annotations

from buff_notifications.components.buff import Buff
from buff_notifications.constants import UNKNOWN_SOURCE


def resolve_source(buff: Buff) -> str:
    """Label identifying what granted the buff.

    Prefers the explicit source, then the buff description, and falls back to
    ``"unknown source"`` so every buff can be grouped.
    """

    if buff.source:
        return buff.source
    if buff.description:
        return buff.description
    return UNKNOWN_SOURCE
