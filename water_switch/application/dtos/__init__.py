"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and its callers.
"""

from .device_dto import (
    CountdownResultDTO,
    DataPointDTO,
    DeviceStatusDTO,
    SwitchResultDTO,
)
from .history_dto import HistoryResponseDTO, RunSessionDTO
from .schedule_dto import (
    ScheduleCreatedDTO,
    ScheduleDTO,
    ScheduleListResponseDTO,
    ScheduleRecordDTO,
    ScheduleRequestDTO,
)

__all__ = [
    "CountdownResultDTO",
    "DataPointDTO",
    "DeviceStatusDTO",
    "SwitchResultDTO",
    "HistoryResponseDTO",
    "RunSessionDTO",
    "ScheduleCreatedDTO",
    "ScheduleDTO",
    "ScheduleListResponseDTO",
    "ScheduleRecordDTO",
    "ScheduleRequestDTO",
]
