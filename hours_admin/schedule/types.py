"""Weekly working-hours schedule types.

A WeekSchedule always carries all seven weekdays. Values are frozen: edits
produce a new schedule instead of mutating the current one, so any holder of
a schedule always sees a complete snapshot.

Open/close times are opaque display strings ("HH:MM" by convention). They are
not parsed or compared, and `status` is independent of `is_open`.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

# Wrapper key used by the local store, the POST body and the JSON export
WRAPPER_KEY = "workingHours"


class StatusColor(StrEnum):
    """Operator-assigned indicator shown next to each day."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


STATUS_COLORS: dict[StatusColor, str] = {
    StatusColor.GREEN: "rgb(34, 197, 94)",
    StatusColor.YELLOW: "rgb(234, 179, 8)",
    StatusColor.RED: "rgb(239, 68, 68)",
}

STATUS_LABELS: dict[StatusColor, str] = {
    StatusColor.GREEN: "Open",
    StatusColor.YELLOW: "Limited",
    StatusColor.RED: "Closed",
}

DAY_NAMES: dict[str, str] = {day: day.capitalize() for day in WEEKDAYS}


class DayHours(BaseModel):
    """Hours for a single weekday.

    Attributes:
        open: Opening time, "HH:MM"
        close: Closing time, "HH:MM"
        is_open: Whether the restaurant opens that day. When False the
            times are kept verbatim but not displayed.
        status: Status indicator color
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    open: str
    close: str
    is_open: bool = Field(alias="isOpen")
    status: StatusColor


class WeekSchedule(BaseModel):
    """All seven weekdays, nothing more and nothing less."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    monday: DayHours
    tuesday: DayHours
    wednesday: DayHours
    thursday: DayHours
    friday: DayHours
    saturday: DayHours
    sunday: DayHours

    @classmethod
    def from_payload(cls, data: Any) -> "WeekSchedule":
        """Build a schedule from a bare mapping or a {"workingHours": ...} wrapper.

        Raises:
            pydantic.ValidationError: If the payload is not a complete schedule
        """
        if isinstance(data, dict) and WRAPPER_KEY in data:
            data = data[WRAPPER_KEY]
        return cls.model_validate(data)

    def to_payload(self) -> dict[str, dict[str, Any]]:
        """Serialize to the wire shape, days in canonical order."""
        return {day: hours.model_dump(mode="json", by_alias=True) for day, hours in self.items()}

    def to_wrapped_payload(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {WRAPPER_KEY: self.to_payload()}

    def day(self, name: str) -> DayHours:
        if name not in WEEKDAYS:
            raise KeyError(name)
        return getattr(self, name)

    def items(self) -> list[tuple[str, DayHours]]:
        return [(day, getattr(self, day)) for day in WEEKDAYS]


def default_schedule() -> WeekSchedule:
    """Schedule used on first start and after a reset."""
    weekday = DayHours(open="11:00", close="22:00", is_open=True, status=StatusColor.GREEN)
    return WeekSchedule(
        monday=weekday,
        tuesday=weekday,
        wednesday=weekday,
        thursday=weekday,
        friday=weekday,
        saturday=weekday,
        sunday=DayHours(open="12:00", close="21:00", is_open=True, status=StatusColor.YELLOW),
    )


class RemoteEndpointConfig(BaseModel):
    """Remote endpoint the schedule is mirrored to.

    Attributes:
        base_url: Site base URL; a trailing slash is stripped before use
        api_key: Opaque bearer token
        enabled: Operator toggle kept alongside the credentials
    """

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(default="", alias="baseUrl")
    api_key: str = Field(default="", alias="apiKey")
    enabled: bool = False

    @property
    def normalized_base_url(self) -> str:
        return self.base_url.removesuffix("/")

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url) and bool(self.api_key)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
