"""Tests for single-field schedule edits."""

import pytest

from hours_admin.editor.updates import update_day
from hours_admin.schedule.types import WEEKDAYS, StatusColor, default_schedule


@pytest.mark.parametrize(
    ("field", "value", "attribute", "expected"),
    [
        ("open", "09:30", "open", "09:30"),
        ("close", "20:00", "close", "20:00"),
        ("isOpen", False, "is_open", False),
        ("is_open", False, "is_open", False),
        ("status", "red", "status", StatusColor.RED),
    ],
)
def test_update_changes_only_the_edited_pair(field, value, attribute, expected):
    original = default_schedule()

    updated = update_day(original, "thursday", field, value)

    assert getattr(updated.thursday, attribute) == expected
    for day in WEEKDAYS:
        if day != "thursday":
            assert updated.day(day) == original.day(day)
    before = original.thursday.model_dump()
    after = updated.thursday.model_dump()
    assert {key for key in before if before[key] != after[key]} == {attribute}


def test_update_returns_new_value_and_leaves_input_untouched():
    original = default_schedule()

    updated = update_day(original, "monday", "open", "08:00")

    assert updated is not original
    assert original.monday.open == "11:00"


def test_closing_a_day_keeps_times_and_status():
    updated = update_day(default_schedule(), "sunday", "isOpen", False)

    assert updated.sunday.open == "12:00"
    assert updated.sunday.close == "21:00"
    assert updated.sunday.status is StatusColor.YELLOW


def test_unknown_day_is_rejected():
    with pytest.raises(ValueError, match="Unknown day"):
        update_day(default_schedule(), "someday", "open", "10:00")


def test_unknown_field_is_rejected():
    with pytest.raises(ValueError, match="Unknown field"):
        update_day(default_schedule(), "monday", "lunch", "12:00")


def test_invalid_status_is_rejected():
    with pytest.raises(ValueError, match="Invalid value"):
        update_day(default_schedule(), "monday", "status", "purple")
