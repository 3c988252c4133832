"""Domain entities for device data points, commands and event logs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence, Union

DataPointValue = Union[bool, int, str]


class DataPointCode(str, Enum):
    """Data-point codes the relay is known to report."""

    SWITCH = "switch_1"
    SWITCH_LEGACY = "switch"
    COUNTDOWN = "countdown_1"
    COUNTDOWN_LEGACY = "countdown"
    RELAY_STATUS = "relay_status"


class RelayStatus(str, Enum):
    """Relay behaviour after power-up or countdown expiry."""

    POWER_OFF = "power_off"
    POWER_ON = "power_on"
    LAST = "last"


@dataclass(frozen=True, slots=True)
class DataPoint:
    """A single ``{code, value}`` pair from a status snapshot."""

    code: str
    value: Any


@dataclass(frozen=True, slots=True)
class DeviceCommand:
    """A data-point write sent to the device."""

    code: DataPointCode
    value: DataPointValue

    def to_payload(self) -> dict:
        return {"code": self.code.value, "value": self.value}


def resolve_data_point(
    points: Sequence[DataPoint], primary: DataPointCode, legacy: DataPointCode
) -> Optional[DataPoint]:
    """Return the primary code's point, falling back to the legacy code."""
    for code in (primary, legacy):
        for point in points:
            if point.code == code.value:
                return point
    return None


@dataclass(slots=True)
class DeviceStatus:
    """Status snapshot of the managed device."""

    points: List[DataPoint] = field(default_factory=list)

    @property
    def is_on(self) -> bool:
        point = resolve_data_point(
            self.points, DataPointCode.SWITCH, DataPointCode.SWITCH_LEGACY
        )
        if point is None or point.value is None:
            return False
        return bool(point.value)

    @property
    def countdown_seconds(self) -> int:
        point = resolve_data_point(
            self.points, DataPointCode.COUNTDOWN, DataPointCode.COUNTDOWN_LEGACY
        )
        if point is None or point.value is None:
            return 0
        try:
            return max(0, int(point.value))
        except (TypeError, ValueError):
            return 0


def parse_switch_value(value: Any) -> bool:
    """Log values arrive as ``"true"``/``"false"`` strings or booleans."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


@dataclass(frozen=True, slots=True)
class LogEvent:
    """A timestamped data-point change from the device log."""

    code: str
    value: Any
    event_time: int  # epoch milliseconds

    @property
    def is_on(self) -> bool:
        return parse_switch_value(self.value)


@dataclass(slots=True)
class LogPage:
    """One page of device logs plus the cursor for the next page."""

    logs: List[LogEvent] = field(default_factory=list)
    has_next: bool = False
    next_row_key: Optional[str] = None
