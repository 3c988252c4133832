"""
Schedule DTOs - Application Layer

Request and response models for schedule management. A schedule is exposed
as two linked records (switch on at ``startTime``, switch off at
``endTime``) sharing a ``groupId`` equal to the automation id.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from water_switch.domain.entities.errors import ScheduleValidationError
from water_switch.domain.entities.schedule import Schedule, ScheduleRecord
from water_switch.domain.services.schedule_translator import (
    is_valid_time,
    validate_days,
)


class ScheduleRequestDTO(BaseModel):
    """DTO for creating or replacing a schedule."""

    name: Optional[str] = Field(default=None, description="Display name")
    start_time: str = Field(description="Switch-on time, HH:MM")
    end_time: str = Field(description="Switch-off time, HH:MM")
    days: List[str] = Field(
        default_factory=lambda: ["daily"],
        description="daily, weekdays, weekends, or a list of mon..sun",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Morning shower",
                "startTime": "06:30",
                "endTime": "07:15",
                "days": ["weekdays"],
            }
        },
    )

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if not is_valid_time(value):
            raise ValueError(f"Invalid time {value!r}: expected HH:MM")
        return value

    @field_validator("days")
    @classmethod
    def _check_days(cls, value: List[str]) -> List[str]:
        try:
            return validate_days(value)
        except ScheduleValidationError as e:
            raise ValueError(e.message) from e


class ScheduleRecordDTO(BaseModel):
    """DTO for one on/off half of a schedule."""

    id: str = Field(description="Automation id suffixed with :on or :off")
    group_id: str = Field(description="Automation id shared by both records")
    name: str
    is_enabled: bool
    time: str = Field(description="HH:MM at which the action fires")
    days: List[str]
    action: str = Field(description="on or off")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_domain(cls, record: ScheduleRecord) -> "ScheduleRecordDTO":
        return cls(
            id=record.id,
            group_id=record.group_id,
            name=record.name,
            is_enabled=record.is_enabled,
            time=record.time,
            days=list(record.days),
            action=record.action.value,
        )


class ScheduleDTO(BaseModel):
    """DTO for a schedule as a single window."""

    id: str
    name: str
    is_enabled: bool
    start_time: str
    end_time: str
    duration_minutes: int
    days: List[str]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_domain(cls, schedule: Schedule) -> "ScheduleDTO":
        return cls(
            id=schedule.id,
            name=schedule.name,
            is_enabled=schedule.is_enabled,
            start_time=schedule.start_time,
            end_time=schedule.end_time,
            duration_minutes=schedule.duration_minutes,
            days=list(schedule.days),
        )


class ScheduleListResponseDTO(BaseModel):
    """DTO listing every schedule of the managed device."""

    schedules: List[ScheduleDTO] = Field(default_factory=list)
    records: List[ScheduleRecordDTO] = Field(
        default_factory=list, description="Linked on/off records, in schedule order"
    )

    @classmethod
    def from_domain(cls, schedules: List[Schedule]) -> "ScheduleListResponseDTO":
        return cls(
            schedules=[ScheduleDTO.from_domain(schedule) for schedule in schedules],
            records=[
                ScheduleRecordDTO.from_domain(record)
                for schedule in schedules
                for record in schedule.to_records()
            ],
        )


class ScheduleCreatedDTO(BaseModel):
    """DTO returned after creating a schedule."""

    success: bool = True
    id: str = Field(description="Automation id of the new schedule")
