"""Schedule module - the weekly working-hours value and its defaults."""

from hours_admin.schedule.types import (
    DAY_NAMES,
    STATUS_COLORS,
    STATUS_LABELS,
    WEEKDAYS,
    DayHours,
    RemoteEndpointConfig,
    StatusColor,
    WeekSchedule,
    default_schedule,
)

__all__ = [
    "DAY_NAMES",
    "STATUS_COLORS",
    "STATUS_LABELS",
    "WEEKDAYS",
    "DayHours",
    "RemoteEndpointConfig",
    "StatusColor",
    "WeekSchedule",
    "default_schedule",
]
