"""JSON-file key-value store for locally persisted admin state.

Each key is stored as one JSON document under the data directory. This is the
durable local copy of the schedule and of the remote endpoint config; the two
live under separate keys and are read and written independently.

Core invariant: a read never raises for bad stored content. Missing, truncated
or otherwise corrupt documents read as absent and the caller falls back to its
default value.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from hours_admin.schedule.types import RemoteEndpointConfig, WeekSchedule

SCHEDULE_KEY = "restaurant-admin-data"
ENDPOINT_CONFIG_KEY = "api-config"


class LocalStore:
    """Durable key-value store with load/save/clear semantics."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _path_for(self, key: str) -> Path:
        """Construct the file path for a key.

        Args:
            key: Store key

        Returns:
            Path of the JSON document holding the key

        Raises:
            ValueError: If the key would escape the store directory
        """
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.root / f"{key}.json"

    def load(self, key: str) -> Any | None:
        """Read the value stored under key, or None when absent or unreadable."""
        path = self._path_for(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            logger.warning(
                "Local store entry is not valid UTF-8, treating as absent",
                key=key,
                error=str(e),
                event="local_store_corrupt",
            )
            return None
        except OSError as e:
            logger.warning(
                "Local store read failed, treating as absent",
                key=key,
                error=str(e),
                event="local_store_read_failed",
            )
            return None

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(
                "Local store entry is not valid JSON, treating as absent",
                key=key,
                error=str(e),
                event="local_store_corrupt",
            )
            return None

    def save(self, key: str, value: Any) -> bool:
        """Write value under key, replacing any previous value atomically.

        Returns:
            True on success, False if the value could not be serialized or written
        """
        path = self._path_for(key)
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(
                "Local store value is not JSON-serializable",
                key=key,
                error=str(e),
                event="local_store_serialize_failed",
            )
            return False

        tmp_name: str | None = None
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.root,
                prefix=f".{key}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error(
                "Local store write failed",
                key=key,
                error=str(e),
                event="local_store_write_failed",
            )
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            return False

        logger.debug("Local store entry saved", key=key, event="local_store_saved")
        return True

    def clear(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)
        logger.debug("Local store entry cleared", key=key, event="local_store_cleared")


def load_schedule(store: LocalStore) -> WeekSchedule | None:
    """Load the persisted schedule.

    A document that parses but is not a complete schedule is treated the same
    as a corrupt one: logged and reported as absent.
    """
    data = store.load(SCHEDULE_KEY)
    if data is None:
        return None
    try:
        return WeekSchedule.from_payload(data)
    except ValidationError as e:
        logger.warning(
            "Stored schedule is invalid, treating as absent",
            key=SCHEDULE_KEY,
            error_count=e.error_count(),
            event="local_store_invalid_schedule",
        )
        return None


def save_schedule(store: LocalStore, schedule: WeekSchedule) -> bool:
    return store.save(SCHEDULE_KEY, schedule.to_wrapped_payload())


def clear_schedule(store: LocalStore) -> None:
    store.clear(SCHEDULE_KEY)


def load_endpoint_config(store: LocalStore) -> RemoteEndpointConfig | None:
    data = store.load(ENDPOINT_CONFIG_KEY)
    if data is None:
        return None
    try:
        return RemoteEndpointConfig.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Stored endpoint config is invalid, treating as absent",
            key=ENDPOINT_CONFIG_KEY,
            error_count=e.error_count(),
            event="local_store_invalid_endpoint_config",
        )
        return None


def save_endpoint_config(store: LocalStore, config: RemoteEndpointConfig) -> bool:
    return store.save(ENDPOINT_CONFIG_KEY, config.to_payload())
