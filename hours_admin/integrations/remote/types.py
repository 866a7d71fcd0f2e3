from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from hours_admin.integrations.remote.errors import SyncError

T = TypeVar("T")


class RemoteState(Enum):
    """Pull outcome when the server has nothing stored yet."""

    EMPTY = "empty"


@dataclass(frozen=True)
class SyncResult(Generic[T]):
    """Outcome of one remote call: a value on success, an error otherwise."""

    value: T | None = None
    error: SyncError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "SyncResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: SyncError) -> "SyncResult[T]":
        return cls(error=error)

    def unwrap(self) -> T | None:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value
