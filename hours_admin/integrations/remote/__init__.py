"""Remote endpoint sync - push/pull of the schedule over HTTP."""

from hours_admin.integrations.remote.client import TEST_PATH, WORKING_HOURS_PATH, RemoteSyncClient
from hours_admin.integrations.remote.errors import (
    HttpError,
    ImportFormatError,
    MalformedError,
    SyncError,
    TransportError,
    UnconfiguredError,
)
from hours_admin.integrations.remote.types import RemoteState, SyncResult

__all__ = [
    "TEST_PATH",
    "WORKING_HOURS_PATH",
    "HttpError",
    "ImportFormatError",
    "MalformedError",
    "RemoteState",
    "RemoteSyncClient",
    "SyncError",
    "SyncResult",
    "TransportError",
    "UnconfiguredError",
]
