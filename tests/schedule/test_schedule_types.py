"""Tests for the weekly schedule model.

Tests that:
- The default schedule matches the documented values
- Exactly seven weekdays are accepted
- Both bare and wrapped payloads parse
- Status stays within green/yellow/red
"""

import pytest
from pydantic import ValidationError

from hours_admin.schedule.types import (
    STATUS_COLORS,
    WEEKDAYS,
    DayHours,
    RemoteEndpointConfig,
    StatusColor,
    WeekSchedule,
    default_schedule,
)


def test_default_sunday_entry():
    sunday = default_schedule().sunday

    assert sunday.model_dump(mode="json", by_alias=True) == {
        "open": "12:00",
        "close": "21:00",
        "isOpen": True,
        "status": "yellow",
    }


def test_default_weekdays_open_and_green():
    schedule = default_schedule()

    for day in WEEKDAYS[:-1]:
        hours = schedule.day(day)
        assert hours.open == "11:00"
        assert hours.close == "22:00"
        assert hours.is_open is True
        assert hours.status is StatusColor.GREEN


def test_to_payload_uses_wire_names_in_canonical_order():
    payload = default_schedule().to_payload()

    assert list(payload) == list(WEEKDAYS)
    assert payload["monday"] == {"open": "11:00", "close": "22:00", "isOpen": True, "status": "green"}


def test_from_payload_accepts_wrapped_and_bare_forms():
    schedule = default_schedule()

    assert WeekSchedule.from_payload(schedule.to_payload()) == schedule
    assert WeekSchedule.from_payload(schedule.to_wrapped_payload()) == schedule


def test_from_payload_ignores_key_order():
    payload = default_schedule().to_payload()
    reordered = {day: payload[day] for day in reversed(WEEKDAYS)}

    assert WeekSchedule.from_payload(reordered) == default_schedule()


def test_missing_day_is_rejected():
    payload = default_schedule().to_payload()
    del payload["wednesday"]

    with pytest.raises(ValidationError):
        WeekSchedule.from_payload(payload)


def test_extra_day_is_rejected():
    payload = default_schedule().to_payload()
    payload["holiday"] = payload["monday"]

    with pytest.raises(ValidationError):
        WeekSchedule.from_payload(payload)


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        DayHours.model_validate({"open": "10:00", "close": "18:00", "isOpen": True, "status": "blue"})


def test_time_strings_are_not_validated():
    hours = DayHours.model_validate({"open": "late", "close": "09:00", "isOpen": True, "status": "red"})

    assert hours.open == "late"
    assert hours.close == "09:00"


def test_closed_day_keeps_times_and_status():
    hours = DayHours(open="10:00", close="18:00", is_open=False, status=StatusColor.GREEN)

    assert hours.open == "10:00"
    assert hours.close == "18:00"
    assert hours.status is StatusColor.GREEN


def test_schedule_is_frozen():
    schedule = default_schedule()

    with pytest.raises(ValidationError):
        schedule.monday = schedule.sunday


def test_day_rejects_unknown_name():
    with pytest.raises(KeyError):
        default_schedule().day("funday")


def test_status_color_table():
    assert STATUS_COLORS[StatusColor.GREEN] == "rgb(34, 197, 94)"
    assert STATUS_COLORS[StatusColor.YELLOW] == "rgb(234, 179, 8)"
    assert STATUS_COLORS[StatusColor.RED] == "rgb(239, 68, 68)"


def test_endpoint_config_defaults_and_normalization():
    empty = RemoteEndpointConfig()
    assert empty.base_url == ""
    assert empty.api_key == ""
    assert empty.enabled is False
    assert empty.is_configured is False

    config = RemoteEndpointConfig.model_validate({"baseUrl": "https://site.example/", "apiKey": "k", "enabled": True})
    assert config.normalized_base_url == "https://site.example"
    assert config.is_configured is True
    assert config.to_payload() == {"baseUrl": "https://site.example/", "apiKey": "k", "enabled": True}
