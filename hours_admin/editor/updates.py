"""Field-level edits of a schedule.

An edit never mutates: it returns a new WeekSchedule differing from the input
only in the edited (day, field) pair.
"""

from typing import Any

from pydantic import ValidationError

from hours_admin.schedule.types import WEEKDAYS, DayHours, WeekSchedule

# Accepted field names -> wire name
EDITABLE_FIELDS: dict[str, str] = {
    "open": "open",
    "close": "close",
    "isOpen": "isOpen",
    "is_open": "isOpen",
    "status": "status",
}


def update_day(schedule: WeekSchedule, day: str, field: str, value: Any) -> WeekSchedule:
    """Return a copy of schedule with one field of one day replaced.

    Args:
        schedule: Current schedule
        day: Weekday key ("monday" ... "sunday")
        field: One of open, close, isOpen (or is_open), status
        value: New value for the field

    Returns:
        New schedule; all other days and fields are unchanged

    Raises:
        ValueError: If the day or field is unknown, or the value is invalid
            for the field (e.g. a status outside green/yellow/red)
    """
    if day not in WEEKDAYS:
        raise ValueError(f"Unknown day '{day}'. Expected one of: {', '.join(WEEKDAYS)}")
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"Unknown field '{field}'. Expected one of: open, close, isOpen, status")

    current = schedule.day(day).model_dump(mode="json", by_alias=True)
    current[EDITABLE_FIELDS[field]] = value
    try:
        hours = DayHours.model_validate(current)
    except ValidationError as e:
        raise ValueError(f"Invalid value {value!r} for {day}.{field}") from e

    return schedule.model_copy(update={day: hours})
