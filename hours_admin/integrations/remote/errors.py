"""Failure taxonomy for remote sync and file import.

Errors are carried back to the caller inside a SyncResult rather than raised,
so a failed sync is just a value the editor turns into a message.
"""


class SyncError(Exception):
    """Base class for remote sync failures."""

    kind = "sync"


class UnconfiguredError(SyncError):
    """Raised when the endpoint lacks a base URL or API key.

    Detected before any network attempt.
    """

    kind = "unconfigured"

    def __init__(self, message: str = "Configure the API connection first (base URL and API key)") -> None:
        super().__init__(message)


class HttpError(SyncError):
    """The endpoint answered with a non-success status."""

    kind = "http"

    def __init__(self, status: int, status_text: str) -> None:
        self.status = status
        self.status_text = status_text
        super().__init__(f"HTTP {status}: {status_text}")


class TransportError(SyncError):
    """Network-level failure (DNS, refused connection, timeout)."""

    kind = "transport"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Transport error: {detail}")


class MalformedError(SyncError):
    """Body that is not valid JSON or not a valid schedule."""

    kind = "malformed"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Malformed data: {detail}")


class ImportFormatError(MalformedError):
    """Imported JSON file is unreadable or not a schedule."""
