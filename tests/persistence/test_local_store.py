"""Tests for the JSON-file local store."""

import json

from hours_admin.persistence.local_store import (
    ENDPOINT_CONFIG_KEY,
    SCHEDULE_KEY,
    LocalStore,
    clear_schedule,
    load_endpoint_config,
    load_schedule,
    save_endpoint_config,
    save_schedule,
)
from hours_admin.schedule.types import RemoteEndpointConfig, default_schedule


def test_load_absent_key_returns_none(store: LocalStore):
    assert store.load("missing") is None


def test_save_then_load(store: LocalStore):
    assert store.save("answer", {"value": 42}) is True
    assert store.load("answer") == {"value": 42}


def test_clear_removes_entry_and_is_idempotent(store: LocalStore):
    store.save("answer", [1, 2, 3])
    store.clear("answer")
    store.clear("answer")

    assert store.load("answer") is None


def test_truncated_json_reads_as_absent(store: LocalStore, log_messages):
    store.root.mkdir(parents=True)
    (store.root / f"{SCHEDULE_KEY}.json").write_text('{"workingHours": {"monday": {"open": "1', encoding="utf-8")

    assert store.load(SCHEDULE_KEY) is None
    assert load_schedule(store) is None
    assert any("not valid JSON" in str(message) for message in log_messages)


def test_non_utf8_bytes_read_as_absent(store: LocalStore, log_messages):
    store.root.mkdir(parents=True)
    (store.root / f"{SCHEDULE_KEY}.json").write_bytes(b'{"workingHours": \xff\xfe')

    assert store.load(SCHEDULE_KEY) is None
    assert load_schedule(store) is None
    assert any("not valid UTF-8" in str(message) for message in log_messages)


def test_unserializable_value_is_not_saved(store: LocalStore):
    assert store.save("bad", {"value": object()}) is False
    assert store.load("bad") is None


def test_schedule_round_trip_uses_wrapped_form(store: LocalStore):
    schedule = default_schedule()

    assert save_schedule(store, schedule) is True

    raw = json.loads((store.root / f"{SCHEDULE_KEY}.json").read_text(encoding="utf-8"))
    assert list(raw) == ["workingHours"]
    assert load_schedule(store) == schedule


def test_partial_schedule_reads_as_absent(store: LocalStore):
    payload = default_schedule().to_payload()
    del payload["sunday"]
    store.save(SCHEDULE_KEY, {"workingHours": payload})

    assert load_schedule(store) is None


def test_clear_schedule_keeps_endpoint_config(store: LocalStore):
    config = RemoteEndpointConfig(base_url="https://site.example", api_key="key", enabled=True)
    save_schedule(store, default_schedule())
    save_endpoint_config(store, config)

    clear_schedule(store)

    assert load_schedule(store) is None
    assert load_endpoint_config(store) == config


def test_endpoint_config_is_stored_with_wire_names(store: LocalStore):
    save_endpoint_config(store, RemoteEndpointConfig(base_url="https://site.example", api_key="key"))

    assert store.load(ENDPOINT_CONFIG_KEY) == {"baseUrl": "https://site.example", "apiKey": "key", "enabled": False}


def test_invalid_endpoint_config_reads_as_absent(store: LocalStore):
    store.save(ENDPOINT_CONFIG_KEY, {"baseUrl": ["not", "a", "string"]})

    assert load_endpoint_config(store) is None
