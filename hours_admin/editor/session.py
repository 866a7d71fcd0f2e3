"""Editor session - the operator's working copy of the schedule.

The session owns the in-memory schedule and endpoint config and forwards them
to the local store, the remote client and the exporters. It never decides
persistence timing on its own: edits stay in memory until an explicit save,
a successful push (write-through), a successful pull, or an import.

Every action returns an ActionOutcome with a message meant for the operator.
No failure is fatal; the operator retries manually.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from hours_admin.config.settings import settings
from hours_admin.editor.updates import update_day
from hours_admin.export.files import export_html, export_json, import_json
from hours_admin.export.html_card import render
from hours_admin.integrations.remote.client import RemoteSyncClient
from hours_admin.integrations.remote.errors import ImportFormatError, SyncError, UnconfiguredError
from hours_admin.integrations.remote.types import RemoteState
from hours_admin.persistence.local_store import (
    LocalStore,
    clear_schedule,
    load_endpoint_config,
    load_schedule,
    save_endpoint_config,
    save_schedule,
)
from hours_admin.schedule.types import RemoteEndpointConfig, WeekSchedule, default_schedule


@dataclass(frozen=True)
class ActionOutcome:
    """Result of an editor action as shown to the operator."""

    ok: bool
    message: str


def describe_sync_error(error: SyncError) -> str:
    """Operator-facing text for a sync failure."""
    return str(error)


class AdminSession:
    """Working copy of the schedule plus the actions available on it."""

    def __init__(
        self,
        store: LocalStore | None = None,
        client: RemoteSyncClient | None = None,
        *,
        logo_src: str | None = None,
    ) -> None:
        self.store = store or LocalStore(settings.data_dir)
        self.client = client or RemoteSyncClient()
        self.logo_src = logo_src or settings.card_logo_src
        self.schedule: WeekSchedule = default_schedule()
        self.endpoint: RemoteEndpointConfig = RemoteEndpointConfig()
        self.sync_in_progress = False

    def open(self) -> "AdminSession":
        """Load persisted state, falling back to defaults for anything absent."""
        schedule = load_schedule(self.store)
        if schedule is None:
            logger.info("No stored schedule, using default")
            schedule = default_schedule()
        self.schedule = schedule

        endpoint = load_endpoint_config(self.store)
        self.endpoint = endpoint if endpoint is not None else RemoteEndpointConfig()
        return self

    # Local operations

    def edit(self, day: str, field: str, value: Any) -> ActionOutcome:
        try:
            self.schedule = update_day(self.schedule, day, field, value)
        except ValueError as e:
            return ActionOutcome(False, str(e))
        return ActionOutcome(True, f"Updated {day}.{field}")

    def save_local(self) -> ActionOutcome:
        if not save_schedule(self.store, self.schedule):
            return ActionOutcome(False, "Could not save data locally")
        return ActionOutcome(True, "Data saved locally")

    def reset(self) -> ActionOutcome:
        self.schedule = default_schedule()
        clear_schedule(self.store)
        logger.info("Schedule reset to default")
        return ActionOutcome(True, "Schedule reset to default values")

    def save_endpoint_config(self, config: RemoteEndpointConfig) -> ActionOutcome:
        self.endpoint = config
        if not save_endpoint_config(self.store, config):
            return ActionOutcome(False, "Could not save API settings")
        return ActionOutcome(True, "API settings saved")

    def preview(self) -> str:
        return render(self.schedule, logo_src=self.logo_src)

    def export_json(self, path: Path | str) -> ActionOutcome:
        try:
            target = export_json(self.schedule, path)
        except OSError as e:
            return ActionOutcome(False, f"Export failed: {e}")
        return ActionOutcome(True, f"Schedule exported to {target}")

    def export_html(self, path: Path | str) -> ActionOutcome:
        try:
            target = export_html(self.schedule, path, logo_src=self.logo_src)
        except OSError as e:
            return ActionOutcome(False, f"Export failed: {e}")
        return ActionOutcome(True, f"HTML card exported to {target}")

    def import_json(self, path: Path | str) -> ActionOutcome:
        try:
            schedule = import_json(path)
        except ImportFormatError as e:
            logger.warning(f"Import rejected: {e}")
            return ActionOutcome(False, "Import failed. Check the file format.")
        self.schedule = schedule
        if not save_schedule(self.store, schedule):
            return ActionOutcome(False, "Data imported but could not be saved locally")
        return ActionOutcome(True, "Data imported successfully")

    # Remote operations

    def _begin_sync(self) -> ActionOutcome | None:
        if self.sync_in_progress:
            return ActionOutcome(False, "Another sync is already in progress")
        if not self.endpoint.is_configured:
            return ActionOutcome(False, describe_sync_error(UnconfiguredError()))
        self.sync_in_progress = True
        return None

    async def sync_to_server(self) -> ActionOutcome:
        """Push the current schedule, then persist it locally on success."""
        refused = self._begin_sync()
        if refused is not None:
            return refused
        try:
            schedule = self.schedule
            result = await self.client.push(self.endpoint, schedule)
            if result.error is not None:
                return ActionOutcome(False, f"Sync failed: {describe_sync_error(result.error)}")
            if not save_schedule(self.store, schedule):
                return ActionOutcome(False, "Data sent to the server but could not be saved locally")
            return ActionOutcome(True, "Data synchronized with the server")
        finally:
            self.sync_in_progress = False

    async def load_from_server(self) -> ActionOutcome:
        """Pull the remote schedule, replacing and persisting the local one."""
        refused = self._begin_sync()
        if refused is not None:
            return refused
        try:
            result = await self.client.pull(self.endpoint)
            if result.error is not None:
                return ActionOutcome(False, f"Load failed: {describe_sync_error(result.error)}")
            if result.value is RemoteState.EMPTY or result.value is None:
                return ActionOutcome(True, "The server has no data yet")
            self.schedule = result.value
            if not save_schedule(self.store, self.schedule):
                return ActionOutcome(False, "Data loaded from the server but could not be saved locally")
            return ActionOutcome(True, "Data loaded from the server")
        finally:
            self.sync_in_progress = False

    async def test_connection(self) -> ActionOutcome:
        refused = self._begin_sync()
        if refused is not None:
            return refused
        try:
            result = await self.client.test_connection(self.endpoint)
            if result.error is not None:
                return ActionOutcome(False, f"Connection error: {describe_sync_error(result.error)}")
            return ActionOutcome(True, "Connection successful")
        finally:
            self.sync_in_progress = False
