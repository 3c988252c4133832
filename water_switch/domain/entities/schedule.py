"""Domain entities for user-facing schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class DayPreset(str, Enum):
    """Named day sets with a canonical bitmask."""

    DAILY = "daily"
    WEEKDAYS = "weekdays"
    WEEKENDS = "weekends"


class ScheduleAction(str, Enum):
    ON = "on"
    OFF = "off"


WEEKDAY_NAMES = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")


@dataclass(slots=True)
class ScheduleRecord:
    """One half (switch on or off) of a schedule as shown to clients."""

    id: str
    group_id: str
    name: str
    is_enabled: bool
    time: str
    days: List[str]
    action: ScheduleAction


@dataclass(slots=True)
class Schedule:
    """A daily run window derived from one automation."""

    id: str
    name: str
    is_enabled: bool
    start_time: str
    end_time: str
    duration_minutes: int
    days: List[str] = field(default_factory=list)

    def to_records(self) -> List[ScheduleRecord]:
        """Split into the linked on/off records sharing ``group_id``."""
        return [
            ScheduleRecord(
                id=f"{self.id}:{action.value}",
                group_id=self.id,
                name=self.name,
                is_enabled=self.is_enabled,
                time=time,
                days=list(self.days),
                action=action,
            )
            for action, time in (
                (ScheduleAction.ON, self.start_time),
                (ScheduleAction.OFF, self.end_time),
            )
        ]
