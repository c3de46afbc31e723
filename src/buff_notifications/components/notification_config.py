from __future__ import annotations

from dataclasses import dataclass

from buff_notifications.constants import DEFAULT_WARNING_THRESHOLD_SECONDS


@dataclass(slots=True)
class NotificationConfig:
    """Player-facing notification settings."""

    warning_threshold_seconds: int = DEFAULT_WARNING_THRESHOLD_SECONDS
    show_buff_start_notifications: bool = True
    show_buff_expiring_warnings: bool = True
    show_buff_end_notifications: bool = True
